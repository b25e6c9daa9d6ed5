"""
sources/tabular.py — Pipe-delimited SSURGO tabular reader.

Fields are picked by column index through an explicit index → name map.
The file's header is compared against that map on every read; if any
mapped column has moved or been renamed, SchemaDriftError is raised and
nothing is parsed. Short rows and bad quoting are tolerated: missing
fields read as "" and quote characters are dropped.

Usage:
    source = SoilComponentSource(settings.soil_component_path)
    records = source.run()          # list[SoilRecord]
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

import polars as pl

from aina_shared.models.soil import SoilRecord

from aina_api.sources.base import SchemaDriftError, SourceFormatError, StaticSource

# comp.txt column index → header name
SOIL_COMPONENT_COLUMNS: Final[dict[int, str]] = {
    3: "compname",
    9: "slope_l",
    10: "slope_h",
    11: "resdept_r",
    13: "erocl",
    14: "om_r",
    15: "ph1to1h2o_r",
    20: "drainagecl",
    82: "hydgrp",
    84: "taxorder",
    85: "taxsuborder",
    86: "taxgrtgroup",
    87: "taxsubgrp",
    88: "texture",
}


def check_header(path: Path, header: list[str], columns: dict[int, str]) -> None:
    drifted: dict[int, tuple[str, str | None]] = {}
    for idx, expected in columns.items():
        found = header[idx] if idx < len(header) else None
        if found != expected:
            drifted[idx] = (expected, found)
    if drifted:
        raise SchemaDriftError(path, drifted)


def read_pipe_delimited(path: Path, columns: dict[int, str]) -> list[dict[str, str]]:
    """
    Read a `|`-separated file with a header line into dicts keyed by the
    mapped column names. Quoting is not interpreted: every `"` is removed
    from field values, so a stray or unbalanced quote only affects its own
    field.
    """
    try:
        df = pl.read_csv(
            path,
            separator="|",
            has_header=True,
            quote_char=None,
            infer_schema_length=0,
            truncate_ragged_lines=True,
            encoding="utf8-lossy",
        )
    except pl.exceptions.NoDataError as exc:
        raise SourceFormatError(f"{path.name} is empty") from exc

    check_header(path, [name.replace('"', "").strip() for name in df.columns], columns)
    return df.select(
        [
            pl.col(df.columns[idx])
            .fill_null("")
            .str.replace_all('"', "", literal=True)
            .str.strip_chars()
            .alias(name)
            for idx, name in columns.items()
        ]
    ).to_dicts()


class SoilComponentSource(StaticSource[SoilRecord]):
    name = "SSURGOComponent"

    columns: dict[int, str] = SOIL_COMPONENT_COLUMNS

    def extract(self) -> list[dict[str, str]]:
        return read_pipe_delimited(self._require_file(), self.columns)

    def transform(self, raw: list[dict[str, str]]) -> list[SoilRecord]:
        return [SoilRecord.from_fields(row) for row in raw]
