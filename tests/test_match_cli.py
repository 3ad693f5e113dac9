from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from scripts.export_seed_listings import main as export_main
from scripts.match_scholarships import main


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_main_matches_profile_against_listing_file(tmp_path: Path, capsys) -> None:  # noqa: ANN001
    profile_path = _write_json(
        tmp_path / "profile.json",
        {
            "student_id": "stu-1",
            "gpa": 3.8,
            "intended_majors": ["Computer Science"],
            "income_band": "50k_75k",
            "state": "CA",
        },
    )
    listings_path = _write_json(
        tmp_path / "listings.json",
        [
            {
                "listing_id": "cs-award",
                "title": "CS Award",
                "amount": 5000,
                "deadline": "2026-04-01",
                "gpa_min": 3.5,
                "majors": ["Computer Science", "Engineering"],
                "competitiveness": "medium",
            },
            {"listing_id": "broken", "title": "No Deadline", "amount": 100},
        ],
    )
    output_path = tmp_path / "out" / "report.json"
    store_path = tmp_path / "matches.parquet"

    exit_code = main(
        [
            "--profile",
            str(profile_path),
            "--listings",
            str(listings_path),
            "--output",
            str(output_path),
            "--store",
            str(store_path),
        ]
    )

    assert exit_code == 0
    printed = capsys.readouterr().out
    assert "CS Award ($5,000, due 2026-04-01) score=50" in printed
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert [match["listing"]["listing_id"] for match in payload["matches"]] == ["cs-award"]
    assert payload["skipped"] == ["broken"]
    assert payload["weights"]["gpa"] == 25
    assert pd.read_parquet(store_path)["listing_id"].tolist() == ["cs-award"]


def test_main_applies_weight_overrides(tmp_path: Path) -> None:
    profile_path = _write_json(tmp_path / "profile.json", {"gpa": 3.8})
    listings_path = _write_json(
        tmp_path / "listings.json",
        [{"listing_id": "gpa", "title": "GPA Award", "amount": 100, "deadline": "2026-04-01", "gpa_min": 3.0}],
    )
    weights_path = _write_json(tmp_path / "weights.json", {"match_weights": {"gpa": 40}})
    output_path = tmp_path / "report.json"

    exit_code = main(
        [
            "--profile",
            str(profile_path),
            "--listings",
            str(listings_path),
            "--weights",
            str(weights_path),
            "--output",
            str(output_path),
        ]
    )

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["matches"][0]["score"] == 45


def test_main_without_profile_reports_profile_required(tmp_path: Path) -> None:
    assert main(["--output", str(tmp_path / "report.json")]) == 2
    assert not (tmp_path / "report.json").exists()


def test_export_seed_listings_writes_flat_records(tmp_path: Path) -> None:
    output_path = tmp_path / "seed.json"

    assert export_main(["--output", str(output_path)]) == 0

    records = json.loads(output_path.read_text(encoding="utf-8"))
    assert records[0]["listing_id"] == "coca-cola-scholars-2025"
    assert records[0]["gpa_min"] == 3.0
    assert "eligibility" not in records[0]
