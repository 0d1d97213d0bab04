import pytest

from yamlls.config import (
    TEXT_DOCUMENT_SYNC_FULL,
    Config,
    FormatConfig,
    parse_init_options,
    resolve_indentation,
    server_capabilities,
)


def test_parse_init_options_empty():
    cfg = parse_init_options(None)
    assert cfg.format.indentation == 0
    assert cfg.format.normalize_strings is False


def test_parse_init_options_detect_string():
    raw = {"format": {"indentation": "detect", "normalizeStrings": False}}
    assert parse_init_options(raw).format.indentation == 0


def test_parse_init_options_fixed_indent():
    raw = {"format": {"indentation": 4.0}}
    assert parse_init_options(raw).format.indentation == 4


def test_parse_init_options_normalize_strings():
    raw = {"format": {"normalizeStrings": True}}
    assert parse_init_options(raw).format.normalize_strings is True


def test_parse_init_options_negative_indent_falls_back_to_detect():
    raw = {"format": {"indentation": -1.0}}
    assert parse_init_options(raw).format.indentation == 0


def test_parse_init_options_malformed_gives_defaults():
    assert parse_init_options("not-an-object") == Config()


@pytest.mark.parametrize(
    "raw",
    [
        [1, 2],
        {"format": "nope"},
        {"format": {"normalizeStrings": "yes", "indentation": 4}},
    ],
)
def test_parse_init_options_bad_shapes_give_defaults(raw):
    assert parse_init_options(raw) == Config()


def test_parse_init_options_ignores_unknown_fields():
    raw = {"other": 1, "format": {"indentation": 2, "extra": True}}
    assert parse_init_options(raw) == Config(FormatConfig(indentation=2))


def test_parse_init_options_case_insensitive_keys():
    raw = {"Format": {"NormalizeStrings": True, "Indentation": 3}}
    assert parse_init_options(raw) == Config(FormatConfig(3, True))


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0),
        ("detect", 0),
        ("4", 0),
        (4, 4),
        (0, 0),
        (-2, 0),
        (2.9, 2),
        (0.5, 0),
        (True, 0),
        ([4], 0),
    ],
)
def test_resolve_indentation(value, expected):
    assert resolve_indentation(value) == expected


def test_capabilities_advertise_providers():
    caps = server_capabilities()
    assert caps["foldingRangeProvider"] is True
    assert caps["hoverProvider"] is True
    assert caps["documentSymbolProvider"] is True


def test_capabilities_full_sync_and_completion_trigger():
    caps = server_capabilities()
    assert caps["textDocumentSync"] == TEXT_DOCUMENT_SYNC_FULL
    assert caps["completionProvider"]["triggerCharacters"] == ["*"]
    assert caps["renameProvider"] == {"prepareProvider": True}