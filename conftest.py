import pytest

SAMPLE_INPUT = "3   4\n4 3\n2 5\n1 3\n3 9\n3 3\n"

@pytest.fixture
def sample_file(tmp_path):
    filepath = tmp_path / '1.txt'
    filepath.write_text(SAMPLE_INPUT, encoding='utf-8')
    return filepath
