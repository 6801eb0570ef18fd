"""Tests for console and JSON file sinks."""

import json
from pathlib import Path

import pytest

from realty.exceptions import SinkError
from realty.models import Apartment, Condo, Property, from_dict
from realty.sinks import ConsoleSink, JsonFileSink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_write_batch(self, capsys: pytest.CaptureFixture[str], sample_apartment: Apartment) -> None:
        sink = ConsoleSink(pretty=False)
        sink.write_batch("apartment", [sample_apartment])

        out = capsys.readouterr().out
        assert "Entity: apartment (1 records)" in out
        assert '"unit": "212B"' in out

    def test_pretty_output(self, capsys: pytest.CaptureFixture[str], sample_property: Property) -> None:
        ConsoleSink(pretty=True).write_batch("property", [sample_property])
        assert '  "street": "123 St Charles Place"' in capsys.readouterr().out

    def test_max_records(self, capsys: pytest.CaptureFixture[str], sample_property: Property) -> None:
        other = Property(2, "2 Main St", "Austin", "TX", "73301")
        sink = ConsoleSink(pretty=False, max_records=1)
        sink.write_batch("property", [sample_property, other])

        out = capsys.readouterr().out
        assert "... and 1 more records" in out
        assert "2 Main St" not in out

    def test_max_records_zero(self, capsys: pytest.CaptureFixture[str], sample_property: Property) -> None:
        """Zero shows only the header and the remainder line."""
        sink = ConsoleSink(pretty=False, max_records=0)
        sink.write_batch("property", [sample_property])

        out = capsys.readouterr().out
        assert "St Charles Place" not in out
        assert "... and 1 more records" in out
        assert sink.counts == {"property": 1}

    def test_counts_accumulate(self, sample_property: Property) -> None:
        sink = ConsoleSink()
        sink.write_batch("property", [sample_property])
        sink.write_batch("property", [sample_property])
        assert sink.counts == {"property": 2}

    def test_close_prints_summary(self, capsys: pytest.CaptureFixture[str], sample_condo: Condo) -> None:
        sink = ConsoleSink()
        sink.write_batch("condo", [sample_condo])
        sink.close()
        assert "  condo: 1 records" in capsys.readouterr().out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "out"
        JsonFileSink(target)
        assert target.is_dir()

    def test_write_batch(self, tmp_path: Path, sample_condo: Condo) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("condo", [sample_condo])

        data = json.loads((tmp_path / "condo.json").read_text(encoding="utf-8"))
        assert data == [
            {
                "kind": "condo",
                "id": "condo-001",
                "street": "1 Marvin Gardens",
                "city": "Atlantic City",
                "state": "NJ",
                "zip": "08401",
                "unit": "4A",
                "price": "500000",
                "square_feet": 1000,
            }
        ]
        assert sink.counts == {"condo": 1}

    def test_written_records_load_back(
        self, tmp_path: Path, sample_property: Property, sample_apartment: Apartment, sample_condo: Condo
    ) -> None:
        listings = [sample_property, sample_apartment, sample_condo]
        JsonFileSink(tmp_path, pretty=True).write_batch("listings", listings)

        data = json.loads((tmp_path / "listings.json").read_text(encoding="utf-8"))
        assert [from_dict(item) for item in data] == listings

    def test_batch_overwrites_file(self, tmp_path: Path, sample_property: Property) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("property", [sample_property, sample_property])
        sink.write_batch("property", [sample_property])

        data = json.loads((tmp_path / "property.json").read_text(encoding="utf-8"))
        assert len(data) == 1

    def test_unwritable_dir(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(SinkError):
            JsonFileSink(blocker / "out")

    def test_close_prints_summary(self, capsys: pytest.CaptureFixture[str], tmp_path: Path, sample_property: Property) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("property", [sample_property])
        sink.close()
        out = capsys.readouterr().out
        assert f"JSON files written to: {tmp_path}" in out
        assert "  property: 1 records" in out
