"""Loads a reference string scenario from a text file.

The file holds whitespace-separated integers: the page count, the frame
count, the length of the reference string, then that many page numbers.
"""
from collections import namedtuple

from errors import InvalidConfiguration

TestScenario = namedtuple('TestScenario', ['page_count', 'frame_count', 'reference'])
# Keep pytest from collecting the namedtuple as a test class
TestScenario.__test__ = False


def _read_int(tokens, what):
    try:
        token = next(tokens)
    except StopIteration:
        raise InvalidConfiguration(f"Read of {what} failed: unexpected end of data")
    try:
        return int(token)
    except ValueError:
        raise InvalidConfiguration(f"Read of {what} failed: {token!r} is not an integer")


def parse_test_data(text):
    tokens = iter(text.split())
    page_count = _read_int(tokens, 'number of pages')
    frame_count = _read_int(tokens, 'number of frames')
    refstr_len = _read_int(tokens, 'number of entries')
    if page_count < 0 or frame_count < 0 or refstr_len < 0:
        raise InvalidConfiguration(
            f"Counts must be non-negative (pages={page_count}, frames={frame_count}, entries={refstr_len})"
        )

    reference = []
    for i in range(refstr_len):
        page = _read_int(tokens, f'reference string entry {i}')
        if page < 0 or page >= page_count:
            raise InvalidConfiguration(
                f"Reference {i} names page {page}, outside 0 .. {page_count - 1}"
            )
        reference.append(page)

    return TestScenario(page_count, frame_count, reference)


def load_test_data(filename):
    try:
        with open(filename, 'r') as f:
            text = f.read()
    except OSError as e:
        raise InvalidConfiguration(f"Cannot open file {filename}: {e.strerror}")
    return parse_test_data(text)
