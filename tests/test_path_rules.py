"""Tests for the .yaml path rule."""

import pytest

from read_guard.path_rules import (
    BLOCK_MESSAGE,
    Decision,
    evaluate_path,
    extract_candidate_path,
    normalize_path,
)


# ── extract_candidate_path tests ─────────────────────────────────────────────

class TestExtractCandidatePath:
    def test_file_path(self):
        assert extract_candidate_path({"tool_input": {"file_path": "a.py"}}) == "a.py"

    def test_path_fallback(self):
        assert extract_candidate_path({"tool_input": {"path": "src/"}}) == "src/"

    def test_file_path_takes_precedence(self):
        data = {"tool_input": {"file_path": "first.yaml", "path": "second.py"}}
        assert extract_candidate_path(data) == "first.yaml"

    def test_empty_file_path_falls_back_to_path(self):
        data = {"tool_input": {"file_path": "", "path": "values.yaml"}}
        assert extract_candidate_path(data) == "values.yaml"

    def test_missing_fields(self):
        assert extract_candidate_path({}) == ""
        assert extract_candidate_path({"tool_input": {}}) == ""
        assert extract_candidate_path({"tool_name": "Read", "session_id": "x"}) == ""

    def test_null_values(self):
        data = {"tool_input": {"file_path": None, "path": None}}
        assert extract_candidate_path(data) == ""

    def test_non_object_shapes(self):
        assert extract_candidate_path([1, 2]) == ""
        assert extract_candidate_path("secrets.yaml") == ""
        assert extract_candidate_path({"tool_input": "secrets.yaml"}) == ""
        assert extract_candidate_path({"tool_input": {"file_path": 42}}) == ""


class TestNormalizePath:
    def test_backslashes_replaced(self):
        assert normalize_path("C:\\repo\\docs\\openapi.yaml") == "C:/repo/docs/openapi.yaml"

    def test_posix_untouched(self):
        assert normalize_path("docs/openapi.yaml") == "docs/openapi.yaml"


# ── evaluate_path tests ──────────────────────────────────────────────────────

class TestEvaluatePath:
    ALLOWED_CASES = [
        "",
        "main.go",
        "README.md",
        "config.yml",
        "values.YAML",
        "notes.yaml.bak",
        "docs/openapi.yaml",
        "docs\\openapi.yaml",
        "/home/dev/project/docs/openapi.yaml",
        "config/other/docs/openapi.yaml",
        "C:\\work\\api\\docs\\openapi.yaml",
    ]

    BLOCKED_CASES = [
        "secrets.yaml",
        "docker-compose.yaml",
        "docs/other.yaml",
        "openapi.yaml",
        "docs/OpenAPI.yaml",
        ".github/workflows/ci.yaml",
        "C:\\work\\api\\config.yaml",
    ]

    @pytest.mark.parametrize("path", ALLOWED_CASES)
    def test_allowed(self, path):
        decision = evaluate_path(path)
        assert decision.allowed, f"Should have allowed: {path!r}"
        assert decision.reason == ""

    @pytest.mark.parametrize("path", BLOCKED_CASES)
    def test_blocked(self, path):
        decision = evaluate_path(path)
        assert not decision.allowed, f"Should have blocked: {path!r}"
        assert decision.reason == BLOCK_MESSAGE

    def test_decision_carries_path(self):
        assert evaluate_path("secrets.yaml").path == "secrets.yaml"

    def test_block_message_text(self):
        assert BLOCK_MESSAGE == "You cannot read .yaml files except for docs/openapi.yaml"


class TestDecision:
    def test_allowed_is_required(self):
        with pytest.raises(TypeError):
            Decision()
