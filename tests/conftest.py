import pytest

from ingestion.load_sources import SOURCE_FILES
from ingestion.schema import SourceWork


TREE_OF_SOULS_SAMPLE = """CONTENTS
BOOK ONE
MYTHS OF COD
THE HEAVENLY COURT
1. THE FIRST LIGHT
In the beginning there was darkness, and God said let there be light, and there was light across the firmament. Many ages passed before the first day's light faded into memory, and scholars still debate its nature at length across many a long page.
This myth illustrates the primacy of light in creation theology.
Sources:
Midrash Rabbah, Zohar
Studies:
Scholem, Major Trends in Jewish Mysticism
2. THE ANGEL OF DEATH
xii
214
The angel of death was created on the first day, and he waits at the gates of heaven to receive the souls of the righteous, as it is written in Psalms 116:15.
BOOK TWO

MYTHS OF THE TORAH
3. TOO BRIEF
Brief text.
"""

LEGENDS_SAMPLE = """LEGENDS OF THE JEWS
I
THE CREATION OF THE WORLD
THE FIRST THINGS CREATED
In the beginning, two thousand years before the heaven and the earth, seven things were created: the Torah, written with black fire on white fire, and lying in the lap of God; [1]
the Divine Throne, erected in the heaven which later was over the heads of the Hayyot; Paradise on the right side of God, Hell on the left side.
[2]
iv
34
ALPHABET
The Torah was the plan of the world, and the letters of the alphabet came forward one by one, each asking that the world be created through it. See Genesis 1:1 and Ps. 33:6.
II
ADAM
MAN AND THE WORLD
With ten Sayings God created the world, although a single Saying would have sufficed, and man was made the last of all created things so that he might find everything ready for him.
SHORT ONE
Too short.
"""


@pytest.fixture
def data_dir(tmp_path):
    """Source files padded so their markers sit past the configured offsets"""
    directory = tmp_path / "raw"
    directory.mkdir()
    (directory / SOURCE_FILES[SourceWork.SCHWARTZ]).write_text(
        "\n" * 6001 + TREE_OF_SOULS_SAMPLE, encoding="utf-8"
    )
    for source in (SourceWork.GINZBERG_V1, SourceWork.GINZBERG_V2):
        (directory / SOURCE_FILES[source]).write_text(
            "\n" * 401 + LEGENDS_SAMPLE, encoding="utf-8"
        )
    return directory
