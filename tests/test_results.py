"""Tests for result schema validation, writing and run ID generation."""

import json
import re
from dataclasses import replace

import numpy as np
import pytest

from graphanon.anonymize.types import RepairOutcome, RepairResult, Strategy
from graphanon.config import ANCHOR_CONFIG, GraphConfig
from graphanon.results import (
    generate_run_id,
    load_result,
    repair_to_dict,
    validate_result,
    write_result,
)


@pytest.fixture
def repair_result() -> RepairResult:
    return RepairResult(
        strategy=Strategy.GREEDY,
        alpha=0.3,
        outcome=RepairOutcome.PROXIMAL,
        edges_added=12,
        iterations=3,
        random_edges=1,
        initial_max_distance=0.75,
        final_max_distance=0.25,
    )


class TestValidateResult:
    """validate_result accepts valid dicts and rejects invalid ones."""

    @pytest.fixture
    def valid_result(self, repair_result):
        return {
            "schema_version": "1.0",
            "run_id": "n200_l4_a0.3_greedy_s42_20261019_120000",
            "timestamp": "2026-10-19T12:00:00+00:00",
            "description": "test run",
            "tags": ["test"],
            "config": {"graph": {"n": 200}},
            "repair": repair_to_dict(repair_result),
        }

    def test_valid(self, valid_result):
        assert validate_result(valid_result) == []

    def test_missing_fields(self):
        errors = validate_result({"schema_version": "1.0"})
        assert any("Missing required" in e for e in errors)

    def test_missing_repair_fields(self, valid_result):
        del valid_result["repair"]["edges_added"]
        errors = validate_result(valid_result)
        assert any("edges_added" in e for e in errors)

    def test_unknown_outcome(self, valid_result):
        valid_result["repair"]["outcome"] = "maybe"
        errors = validate_result(valid_result)
        assert any("outcome" in e for e in errors)

    def test_negative_count(self, valid_result):
        valid_result["repair"]["iterations"] = -1
        errors = validate_result(valid_result)
        assert any("iterations" in e for e in errors)

    def test_bad_timestamp(self, valid_result):
        valid_result["timestamp"] = "yesterday"
        errors = validate_result(valid_result)
        assert any("ISO 8601" in e for e in errors)

    def test_bad_tags_type(self, valid_result):
        valid_result["tags"] = "not-a-list"
        errors = validate_result(valid_result)
        assert any("tags" in e for e in errors)

    def test_distance_out_of_range(self, valid_result):
        valid_result["repair"]["final_max_distance"] = 1.5
        errors = validate_result(valid_result)
        assert any("final_max_distance" in e for e in errors)

    def test_boolean_count_rejected(self, valid_result):
        valid_result["repair"]["random_edges"] = True
        errors = validate_result(valid_result)
        assert any("random_edges" in e for e in errors)


class TestGenerateRunId:
    """Run ID follows the scannable slug format."""

    def test_generated_graph_format(self):
        rid = generate_run_id(ANCHOR_CONFIG)
        assert re.match(r"^n200_l4_a0\.3_greedy_s42_\d{8}_\d{6}$", rid), rid

    def test_input_file_uses_stem(self):
        cfg = replace(ANCHOR_CONFIG, graph=GraphConfig(input_path="data/karate.txt"))
        assert generate_run_id(cfg).startswith("karate_a0.3_greedy_s42_")


class TestWriteResult:
    """write_result creates the run directory and files."""

    def test_write_result_creates_files(self, tmp_path, repair_result):
        out_dir = write_result(
            ANCHOR_CONFIG,
            repair_result,
            graph_stats={"n": 200, "final_edges": 612},
            results_dir=tmp_path,
        )
        assert out_dir.parent == tmp_path
        data = json.loads((out_dir / "result.json").read_text())
        assert data["schema_version"] == "1.0"
        assert data["run_id"] == out_dir.name
        assert data["repair"]["outcome"] == "proximal"
        assert data["repair"]["strategy"] == "greedy"
        assert data["repair"]["edges_added"] == 12
        assert data["graph"]["final_edges"] == 612
        assert "config_hash" in data["metadata"]
        assert "graph_config_hash" in data["metadata"]

    def test_write_result_with_distances(self, tmp_path, repair_result):
        out_dir = write_result(
            ANCHOR_CONFIG,
            repair_result,
            distances={"before": np.array([0.5, 0.2]), "after": np.array([0.1, 0.0])},
            results_dir=tmp_path,
        )
        loaded = np.load(str(out_dir / "distances.npz"))
        np.testing.assert_array_equal(loaded["before"], [0.5, 0.2])
        np.testing.assert_array_equal(loaded["after"], [0.1, 0.0])

    def test_write_result_validates_before_write(self, tmp_path, repair_result):
        bad = replace(repair_result, edges_added=-3)
        with pytest.raises(ValueError, match="validation failed"):
            write_result(ANCHOR_CONFIG, bad, results_dir=tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestLoadResult:
    """load_result reads and validates result.json files."""

    def test_load_result(self, tmp_path, repair_result):
        out_dir = write_result(ANCHOR_CONFIG, repair_result, results_dir=tmp_path)
        data = load_result(out_dir / "result.json")
        assert data["run_id"] == out_dir.name
        assert data["repair"]["final_max_distance"] == 0.25

    def test_load_result_invalid_file(self, tmp_path):
        bad_file = tmp_path / "bad_result.json"
        bad_file.write_text('{"schema_version": "1.0"}')
        with pytest.raises(ValueError, match="validation failed"):
            load_result(bad_file)
