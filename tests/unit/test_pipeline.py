"""End-to-end pipeline tests with a mocked HTTP transport."""

import csv

import pytest

from vivatech_scraper.errors import FetchError, NotFoundError, ParseError
from vivatech_scraper.pipeline import run_partners, run_speakers


def read_dicts(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


class TestRunSpeakers:
    """Speakers pipeline: fetch → extract → parse → export."""

    def test_single_speaker(self, tmp_path, jane_doe_html, client_for):
        output = tmp_path / "speakers.csv"
        requests = []
        with client_for(jane_doe_html, requests=requests) as client:
            records = run_speakers("https://example.com/speakers", output, client=client)

        assert len(records) == 1
        assert len(requests) == 1
        rows = read_dicts(output)
        assert len(rows) == 1
        row = rows[0]
        assert row["ID"] == "1"
        assert row["FirstName"] == "Jane"
        assert row["LastName"] == "Doe"
        assert row["JobTitle"] == "CEO"
        assert row["Company"] == "Acme"
        assert row["Email"] == ""
        assert row["Tags"] == ""
        assert row["CommunicationManager"] == "N/A"
        assert row["ImageSmallURL"] == "N/A"

    def test_full_page(self, tmp_path, embed, speakers_data, client_for):
        output = tmp_path / "speakers.csv"
        with client_for(embed(speakers_data)) as client:
            run_speakers("https://example.com/speakers", output, client=client)

        rows = read_dicts(output)
        assert [r["ID"] for r in rows] == ["sp-1", "sp-2"]
        assert rows[0]["Tags"] == "AI, Math"
        assert rows[0]["IsTopSpeaker"] == "true"
        assert rows[1]["FirstName"] == "Éric"
        assert rows[1]["Company"] == "R&D Labs"

    def test_missing_payload_dumps_html(self, tmp_path, client_for):
        output = tmp_path / "speakers.csv"
        debug = tmp_path / "debug.html"
        page = "<html><body>Maintenance</body></html>"
        with client_for(page) as client:
            with pytest.raises(NotFoundError):
                run_speakers("https://example.com/speakers", output, client=client, debug_path=debug)

        assert debug.read_text(encoding="utf-8") == page
        assert not output.exists()

    def test_schema_mismatch_writes_nothing(self, tmp_path, embed, client_for):
        output = tmp_path / "speakers.csv"
        debug = tmp_path / "debug.html"
        with client_for(embed([{"id": "1"}, {"id": "2", "tags": "oops"}])) as client:
            with pytest.raises(ParseError):
                run_speakers("https://example.com/speakers", output, client=client, debug_path=debug)

        assert not output.exists()
        assert not debug.exists()

    def test_fetch_failure(self, tmp_path, client_for):
        with client_for("", status_code=500) as client:
            with pytest.raises(FetchError):
                run_speakers("https://example.com/speakers", tmp_path / "out.csv", client=client)


class TestRunPartners:
    """Partners pipeline, including the lenient filter."""

    def test_filters_and_writes(self, tmp_path, embed, partners_data, client_for):
        output = tmp_path / "partners.csv"
        with client_for(embed(partners_data)) as client:
            records = run_partners("https://example.com/partners", output, client=client)

        assert [r.company_name for r in records] == ["Acme Corp", "Tiny Startup - Germany"]
        rows = read_dicts(output)
        assert rows[0] == {
            "CompanyName": "Acme Corp",
            "Category": "gold partner",
            "Country": "France",
            "Description": "Builds everything",
            "Website": "https://acme.example.com",
            "LogoURL": "https://img.example.com/acme.png",
        }
        assert rows[1]["Country"] == "Germany"
        assert rows[1]["Website"] == ""

    def test_missing_payload_dumps_html(self, tmp_path, client_for):
        debug = tmp_path / "debug.html"
        with client_for("<html></html>") as client:
            with pytest.raises(NotFoundError):
                run_partners("https://example.com/partners", tmp_path / "p.csv", client=client, debug_path=debug)
        assert debug.exists()

    def test_truncated_emoji_is_parse_error(self, tmp_path, embed, client_for):
        output = tmp_path / "partners.csv"
        data = [{"id": "1", "name": "Acme " + chr(0xD83D), "type": "startup"}]
        with client_for(embed(data)) as client:
            with pytest.raises(ParseError):
                run_partners("https://example.com/partners", output, client=client)
        assert not output.exists()
