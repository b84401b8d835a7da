"""Unit tests for catalog export."""

from pathlib import Path

import polars as pl
import pytest

from pos_catalog.core.export import EXPORT_SCHEMA, catalog_to_frame, export_catalog
from pos_catalog.core.models import CampusType, Pos, PosType


def _catalog() -> list[Pos]:
    return [
        Pos(id=1, name="Morning Brew", type=PosType.CAFE, campus=CampusType.ALTSTADT, postal_code=69117),
        Pos(id=2, name="Snack Box", type=PosType.VENDING_MACHINE, campus=CampusType.INF, postal_code=69120),
    ]


class TestCatalogToFrame:
    def test_columns_and_values(self) -> None:
        df = catalog_to_frame(_catalog())

        assert df.columns == list(EXPORT_SCHEMA)
        assert df["name"].to_list() == ["Morning Brew", "Snack Box"]
        assert df["type"].to_list() == ["CAFE", "VENDING_MACHINE"]
        assert df["postal_code"].to_list() == [69117, 69120]

    def test_empty_catalog_keeps_schema(self) -> None:
        df = catalog_to_frame([])

        assert df.is_empty()
        assert df.columns == list(EXPORT_SCHEMA)


class TestExportCatalog:
    def test_csv(self, tmp_path: Path) -> None:
        out = export_catalog(_catalog(), tmp_path / "out" / "catalog.csv")

        assert out.exists()
        df = pl.read_csv(out)
        assert df["campus"].to_list() == ["ALTSTADT", "INF"]

    def test_parquet(self, tmp_path: Path) -> None:
        out = export_catalog(_catalog(), tmp_path / "catalog.parquet", fmt="parquet")

        df = pl.read_parquet(out)
        assert df.height == 2
        assert df["id"].to_list() == [1, 2]

    def test_unknown_format(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unknown export format"):
            export_catalog(_catalog(), tmp_path / "catalog.xlsx", fmt="xlsx")
