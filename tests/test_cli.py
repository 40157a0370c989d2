"""
Smoke tests for the storage-bench CLI
"""

import json

import pytest

from storage_bench.cli import build_ratio_table, build_step_table, load_rows, main


@pytest.fixture
def input_file(tmp_path):
    data = {
        "ratios": [
            {"pallet": "treasury", "extrinsic": "tip_new", "avg_extrinsic_time": 1.8363,
             "avg_storage_root_time": 0.0, "ratio": 1.8363, "percentage": 83.6271},
            {"pallet": "identity", "extrinsic": "add_registrar", "avg_extrinsic_time": 1.0,
             "avg_storage_root_time": 0.0, "ratio": 1.0, "percentage": 0.0},
        ],
        "steps": [
            {"pallet": "balances", "extrinsic": "transfer", "steps": [
                {"input_vars": [397, 1000], "avg_extrinsic_time": 187451.3,
                 "avg_storage_root_time": 79826.0, "extrinsic_percentage": 4.7014,
                 "storage_root_percentage": 13.6412},
                {"input_vars": [892, 1000], "avg_extrinsic_time": 194126.4,
                 "avg_storage_root_time": 90757.4, "extrinsic_percentage": 8.4298,
                 "storage_root_percentage": 29.2032},
            ]},
            {"pallet": "system", "extrinsic": "remark"},
        ],
    }
    path = tmp_path / "results.json"
    path.write_text(json.dumps(data))
    return path


class TestLoading:
    def test_load_json(self, input_file):
        data = load_rows(input_file)
        assert len(data["ratios"]) == 2

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "results.yaml"
        path.write_text("ratios:\n  - {pallet: p, extrinsic: e, avg_extrinsic_time: 1,"
                        " avg_storage_root_time: 2, ratio: 2, percentage: 0}\n")
        table = build_ratio_table(load_rows(path)["ratios"])
        assert table.raw_list() == [("p", "e", 1.0, 2.0, 2.0, 0.0)]

    def test_build_step_table(self, input_file):
        table = build_step_table(load_rows(input_file)["steps"])
        assert len(table) == 2
        assert [row[2] for row in table.raw_list()] == [(397, 1000), (892, 1000)]


class TestMain:
    def test_prints_table_in_input_order(self, input_file, capsys):
        assert main([str(input_file)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "|    Pallet    |  Extrinsic   |    Ratio     |   Increase   |"
        assert out[2].startswith("|treasury")
        assert out[3].startswith("|identity")

    def test_sort(self, input_file, capsys):
        assert main([str(input_file), "--sort"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[2] == "|identity      |add_registrar |1             |           0 %|"

    def test_quiet(self, input_file, capsys):
        assert main([str(input_file), "--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_writes_reports(self, input_file, tmp_path):
        out_dir = tmp_path / "out"
        assert main([str(input_file), "-q", "--sort", "-o", str(out_dir),
                     "--format", "markdown", "json", "csv"]) == 0
        assert (out_dir / "storage_root_report.md").exists()
        assert (out_dir / "ratios.csv").exists()
        data = json.loads((out_dir / "storage_root_report.json").read_text())
        assert data["steps"][0]["input_vars"] == [892, 1000]

    def test_writes_charts(self, input_file, tmp_path):
        out_dir = tmp_path / "out"
        assert main([str(input_file), "-q", "-o", str(out_dir), "--charts"]) == 0
        assert (out_dir / "ratios.png").exists()
        assert (out_dir / "steps.png").exists()

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json"), "-q"]) == 1

    def test_malformed_rows(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"ratios": [{"pallet": "p"}]}))
        assert main([str(path), "-q"]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main([str(path), "-q"]) == 1

    def test_step_row_not_a_mapping(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"steps": [[1, 2]]}))
        assert main([str(path), "-q"]) == 1

    def test_ratio_row_not_a_mapping(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"ratios": ["identity"]}))
        assert main([str(path), "-q"]) == 1

    def test_malformed_settings(self, input_file, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("chart_dpi: [1]\n")
        assert main([str(input_file), "-q", "--config", str(config)]) == 1


class TestBuildTables:
    def test_rejects_non_mapping_rows(self):
        with pytest.raises(ValueError):
            build_step_table([[1, 2]])
        with pytest.raises(ValueError):
            build_ratio_table(["identity"])
