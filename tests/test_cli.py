from typer.testing import CliRunner

from conftest import KEY, PLAINTEXT
from hillcracker.cli import app

runner = CliRunner()


def test_plugins():
    result = runner.invoke(app, ["plugins"])
    assert result.exit_code == 0
    assert "hill" in result.output


def test_encrypt_decrypt():
    result = runner.invoke(app, ["encrypt", "-k", KEY, "HELP"])
    assert result.exit_code == 0
    assert result.output.strip() == "DPLE"

    result = runner.invoke(app, ["decrypt", "-k", KEY, "DPLE"])
    assert result.exit_code == 0
    assert result.output.strip() == "HELP"


def test_decrypt_bad_key():
    result = runner.invoke(app, ["decrypt", "-k", "2,4,6,8", "ABCD"])
    assert result.exit_code == 2


def test_digrams(tmp_path):
    path = tmp_path / "ct.txt"
    path.write_text("abab\ncd\n")
    result = runner.invoke(app, ["digrams", str(path)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["AB  2", "CD  1"]


def test_crack_writes_result(tmp_path, ciphertext):
    path = tmp_path / "ct.txt"
    out = tmp_path / "result.txt"
    path.write_text(ciphertext + "\n")
    out.write_text("stale")

    result = runner.invoke(app, ["crack", str(path), "-o", str(out), "--top", "5"])

    assert result.exit_code == 0, result.output
    assert "[3, 3; 2, 5]" in result.output
    assert "[15, 17; 20, 9]" in result.output
    assert out.read_text() == PLAINTEXT


def test_crack_with_workers(tmp_path, ciphertext):
    path = tmp_path / "ct.txt"
    out = tmp_path / "result.txt"
    path.write_text(ciphertext)

    result = runner.invoke(app, ["crack", str(path), "-o", str(out), "--top", "5", "--workers", "2"])

    assert result.exit_code == 0, result.output
    assert out.read_text() == PLAINTEXT


def test_crack_missing_file(tmp_path):
    result = runner.invoke(app, ["crack", str(tmp_path / "nope.txt"), "-o", str(tmp_path / "out.txt")])
    assert result.exit_code == 1
    assert not (tmp_path / "out.txt").exists()


def test_crack_bad_guess(tmp_path):
    path = tmp_path / "ct.txt"
    path.write_text("ABCD")
    result = runner.invoke(app, ["crack", str(path), "--guess", "THE"])
    assert result.exit_code == 2
