from pathlib import Path

from unmunch import Dictionary

BASE_FOLDER = Path(__file__).parent / 'fixtures'


def fixture(name):
    return str(BASE_FOLDER / name)


def read_list(name):
    path = BASE_FOLDER / name
    if not path.is_file():
        return []

    return [ln.strip() for ln in path.read_text(encoding='utf-8').splitlines() if ln.strip()]


def read_dictionary(name):
    return Dictionary.from_files(fixture(name + '.aff'))
