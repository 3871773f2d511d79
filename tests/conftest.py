"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from blakesum.cli.config import Mode, RunConfig, build_run_config
from blakesum.hashing.hasher import Hasher
from blakesum.hashing.registry import Algorithm


# Published BLAKE test vectors (all-zero salt)
EMPTY_DIGESTS = {
    224: "7dc5313b1c04512a174bd6503b89607aecbee0903d40a8a569c94eed",
    256: "716f6e863f744b9ac22c97ec7b76ea5f5908bc5b2f67c61510bfc4751384ea7a",
    384: (
        "c6cbd89c926ab525c242e6621f2f5fa73aa4afe3d9e24aed727faaadd6af38b6"
        "20bdb623dd2b4788b1c8086984af8706"
    ),
    512: (
        "a8cfbbd73726062df0c6864dda65defe58ef0cc52a5625090fa17601e1eecd1b"
        "628e94f396ae402a00acc9eab77b4d4c2e852aaaa25a636d80af3fc7913ef5b8"
    ),
}

ZERO_BYTE_DIGESTS = {
    224: "4504cb0314fb2a4f7a692e696e487912fe3f2468fe312c73a5278ec5",
    256: "0ce8d4ef4dd7cd8d62dfded9d4edb0a774ae6a41929a74da23109e8f11139c87",
    384: (
        "10281f67e135e90ae8e882251a355510a719367ad70227b137343e1bc122015c"
        "29391e8545b5272d13a7c2879da3d807"
    ),
    512: (
        "97961587f6d970faba6d2478045de6d1fabd09b61ae50932054d52bc29d31be4"
        "ff9102b9f69e2bbdb83be13d4b9c06091e5fa0b48bd081b634058be0ec49beb3"
    ),
}

# Two-block messages: 72 zero bytes (224/256), 144 zero bytes (384/512)
TWO_BLOCK_DIGESTS = {
    224: "f5aa00dd1cb847e3140372af7b5c46b4888d82c8c0a917913cfb5d04",
    256: "d419bad32d504fb7d44d460c42c5593fe544fa4c135dec31e21bd9abdcc22d41",
    384: (
        "0b9845dd429566cdab772ba195d271effe2d0211f16991d766ba749447c5cde5"
        "69780b2daa66c4b224a2ec2e5d09174c"
    ),
    512: (
        "313717d608e9cf758dcb1eb0f0c3cf9fc150b2d500fb33f51c52afc99d358a2f"
        "1374b8a38bba7974e7f6ef79cab16f22ce1e649d6e01ad9589c213045d545dde"
    ),
}

FOX = b"The quick brown fox jumps over the lazy dog"
FOX_DIGESTS = {
    256: "7576698ee9cad30173080678e5965916adbb11cb5245d386bf1ffda1cb26c9d7",
    512: (
        "1f7e26f63b6ad25a0896fd978fd050a1766391d2fd0471a77afb975e5034b7ad"
        "2d9ccf8dfb47abbbe656e1b82fbc634ba42ce186e8dc5e1ce09a885d41f43451"
    ),
}


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_files(tmp_path: Path) -> list[Path]:
    """Create three small files with distinct content."""
    files = []
    for name, content in [
        ("alpha.txt", b"alpha\n"),
        ("beta.bin", bytes(range(256)) * 3),
        ("empty.dat", b""),
    ]:
        path = tmp_path / name
        path.write_bytes(content)
        files.append(path)
    return files


@pytest.fixture
def print_config(sample_files: list[Path]) -> RunConfig:
    """Default print-mode configuration over the sample files."""
    return build_run_config(Mode.PRINT, 256, (0, 0, 0, 0), [str(p) for p in sample_files])


@pytest.fixture
def hasher256() -> Hasher:
    """BLAKE-256 hasher with the default salt."""
    return Hasher(Algorithm.BLAKE256)


def write_manifest(path: Path, lines: list[str]) -> Path:
    """Write manifest lines, newline terminated."""
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path
