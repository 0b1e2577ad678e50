"""Shared fixtures for the xorcrack test suite"""

import random

import pytest

from xorcrack.utils.codec import encode_base16, encode_base64
from xorcrack.utils.xor_tools import repeating_key_xor

LONG_PLAINTEXT = (
    "The old harbour town woke slowly on winter mornings. Fishermen walked down "
    "to the boats before the sun was up, carrying coffee in tin cups and talking "
    "about the weather, the price of fuel and the catch they hoped to bring home. "
    "Above them the gulls circled and called, waiting for the first nets to come "
    "in, and the wind came off the water cold and sharp enough to make the eyes "
    "run.\n"
    "In the bakery on the corner the lights had been on for hours. The baker was "
    "a tall quiet man who had learned the trade from his mother, and he still "
    "used her recipes for the dark rye bread that people came from other towns "
    "to buy. He did not say much to his customers, but he remembered what each "
    "of them liked, and he would often put an extra roll in the bag for the "
    "children who waited by the door with their parents.\n"
    "Further up the hill stood the school, a long building of grey stone with a "
    "bell tower that had not rung in living memory. The teachers arrived at eight "
    "and the children soon after, shouting and running across the yard until the "
    "doors were opened. There were only four classrooms, and the older pupils "
    "helped the younger ones with their reading in the afternoons, sitting "
    "together at the wide tables by the windows where the light was best.\n"
    "At the end of the main street there was a small library that opened three "
    "days a week. It held more books than anyone could have read in a lifetime, "
    "stacked on shelves that reached the ceiling, and a ladder on wheels for the "
    "ones at the top. The librarian kept a list of every book that had been "
    "borrowed over the last forty years, written by hand in a row of heavy green "
    "ledgers, and she could tell you who had read a book before you and what they "
    "had thought of it.\n"
    "When the boats came back in the early afternoon the whole town seemed to "
    "gather at the harbour wall. The fish were sorted and packed in ice, the nets "
    "were hung out to dry, and the men stood around in their heavy boots telling "
    "the same stories they had told the day before. Some of the stories were true "
    "and some were not, but nobody minded very much, because the telling was the "
    "point and everyone knew how they were meant to end.\n"
    "In the evening the lamps were lit along the sea front and the wind usually "
    "dropped. Families walked out along the path to the lighthouse and back, the "
    "dogs ran ahead on the sand, and the sound of the waves was steady and low. "
    "It was not an exciting place to live, and the young people often said that "
    "they would leave as soon as they could, but many of them came back in the "
    "end, and they brought their own children down to the harbour to watch the "
    "boats go out before the sun was up.\n"
)

TERMINATOR_KEY = b"Terminator X: Bring the noise"


@pytest.fixture
def long_plaintext() -> bytes:
    return LONG_PLAINTEXT.encode('ascii')


@pytest.fixture
def repeating_key_ciphertext(long_plaintext) -> bytes:
    return repeating_key_xor(long_plaintext, TERMINATOR_KEY)


@pytest.fixture
def wrapped_base64(repeating_key_ciphertext) -> str:
    """Ciphertext as base-64 wrapped at 60 columns, like a challenge file"""
    encoded = encode_base64(repeating_key_ciphertext)
    return '\n'.join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + '\n'


@pytest.fixture
def single_byte_candidates():
    """Hex lines of random noise with one single-byte XOR encrypted line"""
    rng = random.Random(1337)
    lines = [encode_base16(bytes(rng.randrange(256) for _ in range(30)))
             for _ in range(40)]
    secret = bytes(b ^ 0x35 for b in b"Now that the party is jumping\n")
    lines.insert(17, encode_base16(secret))
    return lines
