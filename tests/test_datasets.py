import pytest

from area_price_regression.datasets import HOUSES, load_samples
from area_price_regression.errors import DatasetError
from area_price_regression.model import Sample


def test_houses_sample_data() -> None:
    assert len(HOUSES) == 6
    assert HOUSES[3] == Sample(area=95.0, price=260000.0)
    assert HOUSES[4] == Sample(area=140.0, price=340000.0)


def test_load_samples_from_csv(tmp_path) -> None:
    path = tmp_path / "houses.csv"
    path.write_text("area,price,city\n35,120000,Lisboa\n52.5,155000,Porto\n")
    assert load_samples(path) == [Sample(35.0, 120000.0), Sample(52.5, 155000.0)]


def test_load_samples_reports_bad_row(tmp_path) -> None:
    path = tmp_path / "houses.csv"
    path.write_text("area,price\n35,120000\nbig,155000\n")
    with pytest.raises(DatasetError, match=":3:"):
        load_samples(path)


@pytest.mark.parametrize("row", ["-10,1000", "0,1000", "nan,1000", "40,inf", "40,"])
def test_load_samples_rejects_invalid_values(tmp_path, row: str) -> None:
    path = tmp_path / "houses.csv"
    path.write_text(f"area,price\n{row}\n")
    with pytest.raises(DatasetError):
        load_samples(path)


def test_load_samples_requires_columns(tmp_path) -> None:
    path = tmp_path / "houses.csv"
    path.write_text("size,cost\n35,120000\n")
    with pytest.raises(DatasetError, match="area, price"):
        load_samples(path)


def test_load_samples_requires_rows(tmp_path) -> None:
    path = tmp_path / "houses.csv"
    path.write_text("area,price\n")
    with pytest.raises(DatasetError):
        load_samples(path)


def test_load_samples_wraps_missing_file(tmp_path) -> None:
    with pytest.raises(DatasetError, match="cannot read dataset"):
        load_samples(tmp_path / "missing.csv")


def test_load_samples_wraps_undecodable_file(tmp_path) -> None:
    path = tmp_path / "houses.csv"
    path.write_bytes(b"area,price\n\xff\xfe,1\n")
    with pytest.raises(DatasetError, match="cannot read dataset"):
        load_samples(path)
