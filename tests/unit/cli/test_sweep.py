"""Unit tests for the sweep command."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

from gensweep.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _keep_file(tmp_path: Path, *lines: str) -> Path:
    """Write a keep list and return its path."""
    path = tmp_path / "written.txt"
    path.write_text("\n".join(lines) + "\n")
    return path


class TestSweepCommand:
    """Tests for gensweep sweep command."""

    def test_sweep_deletes_unlisted(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """Files not in the keep list are deleted after confirmation."""
        root = make_tree("x/y.txt", "x/z.txt", "stale/only.txt")
        keep = _keep_file(tmp_path, "x/y.txt")

        result = runner.invoke(app, ["sweep", str(root), "--keep-file", str(keep)], input="y\n")

        assert result.exit_code == 0
        assert "Proceed with deleting 2 file(s)?" in result.stdout
        assert "All 2 file(s) deleted." in result.stdout
        assert (root / "x/y.txt").exists()
        assert not (root / "x/z.txt").exists()
        assert not (root / "stale").exists()

    def test_sweep_aborted(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """Declining the prompt deletes nothing."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path)

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep)], input="n\n")

        assert result.exit_code == 0
        assert "Aborted." in result.stdout
        assert (root / "a.txt").exists()

    def test_sweep_yes_skips_prompt(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """--yes deletes without asking."""
        root = make_tree("a.txt", "b.txt")
        keep = _keep_file(tmp_path, "b.txt")

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "--yes"])

        assert result.exit_code == 0
        assert "Proceed" not in result.stdout
        assert not (root / "a.txt").exists()
        assert (root / "b.txt").exists()

    def test_sweep_dry_run(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """--dry-run reports without deleting or prompting."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path)

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "--dry-run"])

        assert result.exit_code == 0
        assert "Dry-run: 1 file(s) would be deleted." in result.stdout
        assert (root / "a.txt").exists()

    def test_sweep_config_dry_run(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """dry_run in the config file applies without the flag."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path)
        config = tmp_path / "gensweep.toml"
        config.write_text("dry_run = true\n")

        result = runner.invoke(app, ["-c", str(config), "sweep", str(root), "-k", str(keep)])

        assert result.exit_code == 0
        assert (root / "a.txt").exists()

    def test_sweep_keep_list_from_stdin(
        self, make_tree: Callable[..., Path]
    ) -> None:
        """'-' reads the keep list from stdin; comments and blanks are ignored."""
        root = make_tree("a.txt", "b.txt", "c.txt")

        result = runner.invoke(
            app,
            ["sweep", str(root), "-k", "-", "-y"],
            input="# generated\na.txt\n\n  c.txt  \n",
        )

        assert result.exit_code == 0
        assert (root / "a.txt").exists()
        assert not (root / "b.txt").exists()
        assert (root / "c.txt").exists()

    def test_sweep_nothing_to_do(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """When every file is listed nothing is deleted."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path, "a.txt", "new/file.txt")

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep)])

        assert result.exit_code == 0
        assert "Nothing to sweep" in result.stdout
        assert (root / "a.txt").exists()

    def test_sweep_hidden_untouched(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """Hidden files survive a sweep even when unlisted."""
        root = make_tree("a.txt", ".keep/state.json")
        keep = _keep_file(tmp_path)

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "-y"])

        assert result.exit_code == 0
        assert not (root / "a.txt").exists()
        assert (root / ".keep/state.json").exists()

    def test_sweep_path_outside_root(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """A keep entry escaping the root aborts before deleting anything."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path, "../other.txt")

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "-y"])

        assert result.exit_code == 1
        assert "escapes root" in result.output
        assert (root / "a.txt").exists()

    def test_sweep_root_entry_rejected(
        self, make_tree: Callable[..., Path], tmp_path: Path
    ) -> None:
        """A keep entry naming the root itself aborts before deleting anything."""
        root = make_tree("a.txt")
        keep = _keep_file(tmp_path, ".")

        result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "-y"])

        assert result.exit_code == 1
        assert "root directory itself" in result.output
        assert (root / "a.txt").exists()

    def test_sweep_keep_file_comments_and_blanks(
        self, make_tree: Callable[..., Path], tmp_path: Path
    ) -> None:
        """A keep list read from disk skips comments and blank lines."""
        root = make_tree("a.txt", "b.txt", "sub/c.txt")
        keep = _keep_file(tmp_path, "# generated by tool", "", "a.txt", "  sub/c.txt  ")

        result = runner.invoke(app, ["sweep", str(root), "--keep-file", str(keep), "-y"])

        assert result.exit_code == 0
        assert (root / "a.txt").exists()
        assert not (root / "b.txt").exists()
        assert (root / "sub/c.txt").exists()

    def test_sweep_missing_keep_file(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """An unreadable keep list exits with an error."""
        root = make_tree("a.txt")

        result = runner.invoke(app, ["sweep", str(root), "-k", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Cannot read keep list" in result.output
        assert (root / "a.txt").exists()

    def test_sweep_missing_root(self, tmp_path: Path) -> None:
        """A missing root exits with an error."""
        keep = _keep_file(tmp_path)

        result = runner.invoke(app, ["sweep", str(tmp_path / "missing"), "-k", str(keep)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_sweep_failure_exit_code(self, make_tree: Callable[..., Path], tmp_path: Path) -> None:
        """A failed deletion is reported and the exit code is 1."""
        root = make_tree("a.txt", "b.txt")
        keep = _keep_file(tmp_path)
        real_unlink = Path.unlink

        def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name == "a.txt":
                raise PermissionError("Permission denied")
            real_unlink(self, missing_ok=missing_ok)

        with patch.object(Path, "unlink", flaky_unlink):
            result = runner.invoke(app, ["sweep", str(root), "-k", str(keep), "-y"])

        assert result.exit_code == 1
        assert "1 succeeded, 1 failed" in result.output
        assert (root / "a.txt").exists()
        assert not (root / "b.txt").exists()
