import pytest

HEADER = "PLAY_ID,SONG_ID,CLIENT_ID,PLAY_TS"

EXAMPLE_LINES = [
    HEADER,
    "44BB190BC2493964E053CF0A000AB546,9857,1,10/08/2016 09:16:00",
    "44BB190BC24A3964E053CF0A000AB546,3022,1,10/08/2016 09:17:00",
    "44BB190BC24B3964E053CF0A000AB546,9857,1,10/08/2016 09:18:00",
    "44BB190BC24C3964E053CF0A000AB546,217,2,10/08/2016 13:02:00",
    "44BB190BC24D3964E053CF0A000AB546,544,3,10/08/2016 21:40:00",
    "44BB190BC24E3964E053CF0A000AB546,217,4,09/08/2016 21:40:00",
]


@pytest.fixture
def example_lines():
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
    return path
