import json
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "db" / "data"


def get_data_filename(filename: str) -> Path:
    return DATA_DIR / filename


def get_data_from_json(filename: str):
    with open(get_data_filename(filename), "r", encoding="UTF-8") as file:
        return json.load(file)
