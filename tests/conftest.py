import pytest

from seedsync.sync_config import pda_sync_config


def ts_source(seeds: dict) -> str:
    """TypeScript pda.ts text declaring seeds in PDA_SEEDS."""
    body = "".join(f"  {name}: '{value}',\n" for name, value in seeds.items())
    return (
        "import { PublicKey } from '@solana/web3.js';\n\n"
        "export const PDA_SEEDS = {\n"
        f"{body}"
        "} as const;\n"
    )


def rust_source(seeds: dict) -> str:
    """Rust lib.rs text declaring seeds as byte-string consts."""
    decls = "".join(f'pub const {name}: &[u8] = b"{value}";\n' for name, value in seeds.items())
    return (
        "use anchor_lang::prelude::*;\n\n"
        f"{decls}\n"
        "#[program]\n"
        "pub mod neuro_program {}\n"
    )


@pytest.fixture
def project(tmp_path):
    """
    Write a project layout under tmp_path.
    Returns a callable: project(ts_seeds, rust_seeds) -> SyncConfig.
    """
    def _write(ts_seeds: dict, rust_seeds: dict):
        ts = tmp_path / "neuro-shared" / "src" / "pda.ts"
        rs = tmp_path / "neuro-program" / "src" / "lib.rs"
        ts.parent.mkdir(parents=True, exist_ok=True)
        rs.parent.mkdir(parents=True, exist_ok=True)
        ts.write_text(ts_source(ts_seeds), encoding="utf-8")
        rs.write_text(rust_source(rust_seeds), encoding="utf-8")
        return pda_sync_config(tmp_path)
    return _write
