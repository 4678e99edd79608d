import pytest

from possessive.batch import decode_upload, possessive_batch_bytes
from possessive.formatter import create


def test_decode_upload_utf8_bom():
    text, report = decode_upload("Müller\nStrauß\n".encode("utf-8-sig"))
    assert text == "Müller\nStrauß\n"
    assert report["decode_fallback"] is False


def test_batch_one_noun_per_line():
    raw = "John\nChris\nit\n".encode("utf-8")
    out = possessive_batch_bytes(raw, create())

    assert [r["possessive"] for r in out["results"]] == ["John's", "Chris'", "its"]
    assert [r["row"] for r in out["results"]] == [1, 2, 3]
    assert out["report"]["summary"] == {"rows": 3, "results": 3, "warnings": 0, "errors": 0}


def test_batch_uses_first_column():
    raw = "name;city\nJames;Paris\nStrauß;Wien\n".encode("utf-8")
    out = possessive_batch_bytes(raw, create({"style": "alternative"}))

    assert [r["possessive"] for r in out["results"]] == ["name's", "James's", "Strauß'"]


def test_batch_reports_blank_and_invalid_rows():
    raw = b"John\n\n   \nJess\n"
    out = possessive_batch_bytes(raw, create())

    assert [r["noun"] for r in out["results"]] == ["John", "Jess"]

    warnings = out["report"]["warnings"]
    assert len(warnings) == 1
    assert warnings[0]["row"] == 2
    assert warnings[0]["issue"] == "blank_row"
    assert warnings[0]["action"] == "skipped"

    errors = out["report"]["errors"]
    assert len(errors) == 1
    assert errors[0]["row"] == 3
    assert errors[0]["issue"] == "whitespace-only"
    assert errors[0]["action"] == "rejected"

    assert out["report"]["summary"]["rows"] == 4


class _NoMatch:
    def best(self):
        return None


class _BadCodecMatch:
    encoding = "no-such-codec"

    def best(self):
        return self


@pytest.mark.parametrize(
    "detector, raw, text, decode_used",
    [
        (_NoMatch(), b"Caf\xe9\n", "Caf\ufffd\n", "utf-8"),
        (_BadCodecMatch(), b"John\n", "John\n", "utf-8-sig"),
    ],
)
def test_decode_upload_fallback(monkeypatch, detector, raw, text, decode_used):
    monkeypatch.setattr("possessive.batch.from_bytes", lambda data: detector)

    decoded, report = decode_upload(raw)

    assert decoded == text
    assert report["decode_used"] == decode_used
    assert report["decode_fallback"] is True


def test_batch_oversized_cell_is_reported():
    raw = ("John\n" + "x" * 200_000 + "\n").encode("ascii")
    out = possessive_batch_bytes(raw, create())

    assert [r["possessive"] for r in out["results"]] == ["John's"]

    errors = out["report"]["errors"]
    assert len(errors) == 1
    assert errors[0]["row"] == 2
    assert errors[0]["issue"] == "unreadable_csv"
    assert errors[0]["action"] == "rejected"
    assert out["report"]["summary"]["errors"] == 1
