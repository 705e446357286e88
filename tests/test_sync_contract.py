# tests/test_sync_contract.py
# Contract tests for the public seedsync entry points.
#
# CONSTRAINTS:
#   Only public imports from the seedsync package.
#   Files written under tmp_path only.
#   ASCII only.

import pytest

from seedsync import KeyOutcome, run_check


# ---------------------------------------------------------------------------
# CONTRACT: exit codes and key lines
# ---------------------------------------------------------------------------

class TestSynchronizationContract:

    def test_identical_sets_exit_zero_all_matched(self, project, capsys):
        config = project({"FOO": "abc", "BAR": "def"}, {"FOO": "abc", "BAR": "def"})
        assert run_check(config) == 0
        out = capsys.readouterr().out
        assert "FOO: synchronized" in out
        assert "BAR: synchronized" in out

    def test_mismatch_exit_one_with_both_values(self, project, capsys):
        assert run_check(project({"FOO": "abc"}, {"FOO": "xyz"})) == 1
        assert 'FOO: TS="abc" vs Rust="xyz"' in capsys.readouterr().out

    def test_missing_in_rust_exit_one(self, project, capsys):
        assert run_check(project({"FOO": "abc"}, {})) == 1
        assert 'FOO: TS="abc" vs Rust=(missing)' in capsys.readouterr().out

    def test_extra_rust_key_does_not_fail(self, project, capsys):
        assert run_check(project({}, {"BAR": "x"})) == 0
        assert "Extra Rust key: BAR" in capsys.readouterr().out

    def test_case_sensitive_values(self, project, capsys):
        assert run_check(project({"SEED": "seed"}, {"SEED": "Seed"})) == 1

    def test_duplicate_rust_declaration_last_wins(self, project, tmp_path, capsys):
        config = project({"A": "two"}, {})
        config.source_b.path.write_text(
            'pub const A: &[u8] = b"one";\npub const A: &[u8] = b"two";\n',
            encoding="utf-8",
        )
        assert run_check(config) == 0
        assert "Duplicate Rust declaration (last value wins): A" in capsys.readouterr().out

    def test_malformed_ts_block_reports_not_crashes(self, project, capsys):
        config = project({}, {"A": "a"})
        config.source_a.path.write_text("export const PDA_SEEDS = [];\n", encoding="utf-8")
        assert run_check(config) == 0
        out = capsys.readouterr().out
        assert "No TS constants extracted" in out
        assert "Extra Rust key: A" in out


def test_key_outcome_members():
    assert {o.name for o in KeyOutcome} == {"MATCHED", "MISMATCHED", "MISSING_IN_B"}


@pytest.mark.parametrize("ts, rust, expected", [
    ({"FOO": "abc"}, {"FOO": "abc"}, 0),
    ({"FOO": "abc"}, {"FOO": "xyz"}, 1),
    ({"FOO": "abc"}, {}, 1),
    ({}, {"BAR": "x"}, 0),
])
def test_documented_examples(project, capsys, ts, rust, expected):
    assert run_check(project(ts, rust)) == expected
