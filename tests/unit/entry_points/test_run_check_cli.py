import pytest

from seedsync.data_models.failure_types import FAILURE_TYPES, exit_code_for
from seedsync.run_check import main, run_check


class TestRunCheck:

    def test_returns_zero_when_synchronized(self, project, capsys):
        assert run_check(project({"A": "a"}, {"A": "a"})) == 0
        assert "[OK]   A: synchronized" in capsys.readouterr().out

    def test_returns_one_on_mismatch(self, project, capsys):
        assert run_check(project({"A": "a"}, {"A": "b"})) == 1

    def test_read_failure_raises_before_output(self, tmp_path, capsys):
        from seedsync.sync_config import pda_sync_config
        with pytest.raises(RuntimeError, match="READ_FAILURE"):
            run_check(pda_sync_config(tmp_path))
        assert capsys.readouterr().out == ""


class TestMain:

    def test_no_arguments_uses_cwd(self, project, tmp_path, monkeypatch, capsys):
        project({"A": "a"}, {"A": "a"})
        monkeypatch.chdir(tmp_path)
        assert main([]) == 0
        assert "All PDA constants are synchronized!" in capsys.readouterr().out

    def test_project_root_flag(self, project, tmp_path, capsys):
        project({"A": "a"}, {"A": "x"})
        assert main(["--project-root", str(tmp_path)]) == 1

    def test_path_overrides(self, tmp_path, capsys):
        (tmp_path / "seeds.ts").write_text(
            "export const PDA_SEEDS = {\n  A: 'a',\n}\n", encoding="utf-8")
        (tmp_path / "seeds.rs").write_text(
            'pub const A: &[u8] = b"a";\n', encoding="utf-8")
        rc = main([
            "--project-root", str(tmp_path),
            "--ts-path", "seeds.ts",
            "--rust-path", "seeds.rs",
        ])
        assert rc == 0

    def test_missing_file_exit_code_two(self, tmp_path, capsys):
        assert main(["--project-root", str(tmp_path)]) == 2
        err = capsys.readouterr().err
        assert err.startswith("READ_FAILURE:")

    def test_unknown_flag_is_config_violation(self, capsys):
        assert main(["--fix"]) == 3
        assert capsys.readouterr().err.startswith("CONFIG_VIOLATION:")

    def test_flag_missing_value_is_config_violation(self, capsys):
        assert main(["--project-root"]) == 3
        assert "--project-root" in capsys.readouterr().err

    def test_help_still_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0


class TestFailureTypes:

    def test_registry_codes(self):
        assert FAILURE_TYPES["CONSTANT_MISMATCH"] == 1
        assert FAILURE_TYPES["CONSTANT_MISSING"] == 1
        assert FAILURE_TYPES["READ_FAILURE"] == 2
        assert FAILURE_TYPES["CONFIG_VIOLATION"] == 3
        assert FAILURE_TYPES["CHECK_INTERNAL_ERROR"] == 4

    def test_prefixed_message_maps_to_code(self):
        assert exit_code_for(RuntimeError("READ_FAILURE: gone")) == 2
        assert exit_code_for(RuntimeError("CONFIG_VIOLATION: bad")) == 3

    def test_unprefixed_message_is_internal_error(self):
        assert exit_code_for(RuntimeError("boom")) == 4

    def test_prefix_requires_colon(self):
        assert exit_code_for(RuntimeError("READ_FAILURES happen")) == 4
