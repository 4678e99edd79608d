"""
Batch possessive formation for uploaded name lists.

Responsibilities:
- encoding detection + decoding
- delimiter sniffing (only the first column is used)
- per-row possessive formation
- warning / error reporting
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Dict

from charset_normalizer import from_bytes

from .errors import InvalidInputError
from .formatter import PossessiveFormatter, trim_noun

logger = logging.getLogger(__name__)

SNIFF_DELIMITERS = [",", ";", "\t", "|"]


def decode_upload(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped so it never ends up in the first noun.
    - If decode fails, fall back to UTF-8, then to replacement characters.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report


def _sniff_delimiter(text: str) -> str:
    try:
        return csv.Sniffer().sniff(text[:4096], delimiters=SNIFF_DELIMITERS).delimiter
    except csv.Error:
        return ","


def possessive_batch_bytes(raw: bytes, formatter: PossessiveFormatter) -> Dict[str, Any]:
    """
    Turn every first-column noun of an uploaded list into its possessive.
    Returns a dict matching the API's batch envelope.
    """
    text, enc_report = decode_upload(raw)
    delimiter = _sniff_delimiter(text)
    logger.info(
        "Batch upload decoded as %s (detected=%s), delimiter %r",
        enc_report["decode_used"], enc_report["detected"], delimiter,
    )

    results: list[dict] = []
    warnings: list[dict] = []
    errors: list[dict] = []
    total_rows = 0

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    rows = enumerate(reader, start=1)
    while True:
        try:
            i, row = next(rows)
        except StopIteration:
            break
        except csv.Error as exc:
            # the reader cannot resume after a malformed record
            logger.warning("Batch upload unreadable after row %d: %s", total_rows, exc)
            errors.append({
                "row": total_rows + 1,
                "column": None,
                "issue": "unreadable_csv",
                "value": str(exc),
                "action": "rejected",
            })
            break

        total_rows += 1
        cell = row[0] if row else ""

        if cell == "":
            warnings.append({
                "row": i,
                "column": None,
                "issue": "blank_row",
                "value": None,
                "action": "skipped",
            })
            continue

        try:
            possessive = formatter.make_possessive(cell)
        except InvalidInputError as exc:
            logger.debug("Row %d rejected: %s", i, exc)
            errors.append({
                "row": i,
                "column": None,
                "issue": exc.reason,
                "value": cell,
                "action": "rejected",
            })
            continue

        results.append({"row": i, "noun": trim_noun(cell), "possessive": possessive})

    logger.info(
        "Batch processed: %d rows, %d results, %d warnings, %d errors",
        total_rows, len(results), len(warnings), len(errors),
    )

    return {
        "results": results,
        "report": {
            "summary": {
                "rows": total_rows,
                "results": len(results),
                "warnings": len(warnings),
                "errors": len(errors),
            },
            "encoding": enc_report,
            "warnings": warnings,
            "errors": errors,
        },
    }
