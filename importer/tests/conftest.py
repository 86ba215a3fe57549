from __future__ import annotations

import json

import pytest

HEADER = "Númer;Heiti;Einingar;Kennslumisseri;Námstig;Vefslóð"


@pytest.fixture
def write_catalogue(tmp_path):
    """Return a writer for an index.json plus one latin-1 CSV per department."""

    def write(departments):
        manifest = []
        for title, lines in departments:
            filename = f"{len(manifest)}.csv"
            (tmp_path / filename).write_text("\n".join([HEADER, *lines]), encoding="latin-1")
            manifest.append({"title": title, "description": f"{title} description", "csv": filename})
        (tmp_path / "index.json").write_text(json.dumps(manifest), encoding="utf-8")
        return tmp_path

    return write
