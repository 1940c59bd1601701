"""Tests for the cashdrawer command line."""

from pathlib import Path

import pytest
import tomli_w
from typer.testing import CliRunner

from cashdrawer.cli import app
from cashdrawer.config import load_till, save_config, save_till
from cashdrawer.domain.ledger import Till
from cashdrawer.domain.models import Cents, Denomination

runner = CliRunner()

FULL_TILL = [
    ("PENNY", 1.01),
    ("NICKEL", 2.05),
    ("DIME", 3.1),
    ("QUARTER", 4.25),
    ("ONE", 90),
    ("FIVE", 55),
    ("TEN", 20),
    ("TWENTY", 60),
    ("ONE HUNDRED", 100),
]


@pytest.fixture
def config_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point XDG_CONFIG_HOME at a temp dir and return the config path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "cashdrawer" / "config.toml"


@pytest.fixture
def saved_till(config_path: Path) -> Till:
    """Save the full till to the temp config."""
    till = Till.create(FULL_TILL)
    save_till(till, config_path)
    return till


class TestInitCommand:
    """Tests for 'cashdrawer init'."""

    def test_creates_config(self, config_path: Path) -> None:
        """Should create a config with an empty till."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert config_path.exists()
        assert load_till(config_path).empty()

    def test_does_not_overwrite_without_force(self, config_path: Path, saved_till: Till) -> None:
        """Should keep an existing config unless --force is given."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert load_till(config_path) == saved_till

    def test_force_overwrites(self, config_path: Path, saved_till: Till) -> None:
        """Should reset the till with --force."""
        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0
        assert load_till(config_path).empty()


class TestTillCommands:
    """Tests for 'cashdrawer till show' and 'cashdrawer till set'."""

    def test_show(self, saved_till: Till) -> None:
        """Should list the till with its total."""
        result = runner.invoke(app, ["till", "show"])

        assert result.exit_code == 0
        assert "ONE HUNDRED" in result.output
        assert "$335.41" in result.output

    def test_show_without_config(self, config_path: Path) -> None:
        """Should fail with a hint to run init."""
        result = runner.invoke(app, ["till", "show"])

        assert result.exit_code == 1
        assert "cashdrawer init" in result.output

    def test_set(self, config_path: Path, saved_till: Till) -> None:
        """Should update one denomination."""
        result = runner.invoke(app, ["till", "set", "quarter", "10"])

        assert result.exit_code == 0
        assert load_till(config_path).quantity(Denomination.QUARTER) == Cents(1000)

    def test_set_unknown_denomination(self, config_path: Path, saved_till: Till) -> None:
        """Should reject an unknown denomination."""
        result = runner.invoke(app, ["till", "set", "FIFTY", "10"])

        assert result.exit_code == 1
        assert "Unknown denomination" in result.output

    def test_set_partial_unit(self, config_path: Path, saved_till: Till) -> None:
        """Should refuse to store part of a coin and leave the till alone."""
        result = runner.invoke(app, ["till", "set", "QUARTER", "0.30"])

        assert result.exit_code == 1
        assert "not a whole number of QUARTER" in " ".join(result.output.split())
        assert load_till(config_path) == saved_till

    def test_set_invalid_amount(self, config_path: Path, saved_till: Till) -> None:
        """Should reject an amount that is not a number."""
        result = runner.invoke(app, ["till", "set", "ONE", "lots"])

        assert result.exit_code == 1
        assert "Invalid amount" in result.output


class TestChangeCommand:
    """Tests for 'cashdrawer change'."""

    def test_open(self, saved_till: Till) -> None:
        """Should show the itemized change."""
        result = runner.invoke(app, ["change", "3.26", "100"])

        assert result.exit_code == 0
        assert "OPEN" in result.output
        assert "TWENTY" in result.output
        assert "$96.74" in result.output

    def test_insufficient_funds_is_not_an_error(self, config_path: Path) -> None:
        """Should exit cleanly when change cannot be made."""
        save_till(Till.create([("PENNY", 0.01), ("ONE", 1)]), config_path)

        result = runner.invoke(app, ["change", "19.50", "20"])

        assert result.exit_code == 0
        assert "INSUFFICIENT_FUNDS" in result.output

    def test_json_output(self, saved_till: Till) -> None:
        """Should print the result as JSON."""
        result = runner.invoke(app, ["change", "19.50", "20", "--json"])

        assert result.exit_code == 0
        assert '"status": "OPEN"' in result.output
        assert '"QUARTER"' in result.output

    def test_apply_saves_depleted_till(self, config_path: Path, saved_till: Till) -> None:
        """Should write the till left after paying out."""
        result = runner.invoke(app, ["change", "19.50", "20", "--apply"])

        assert result.exit_code == 0
        assert load_till(config_path).quantity(Denomination.QUARTER) == Cents(375)

    def test_without_apply_till_unchanged(self, config_path: Path, saved_till: Till) -> None:
        """Should leave the saved till alone by default."""
        runner.invoke(app, ["change", "19.50", "20"])

        assert load_till(config_path) == saved_till

    def test_till_file(self, config_path: Path, tmp_path: Path) -> None:
        """Should use a till from a separate TOML file."""
        till_file = tmp_path / "drawer.toml"
        with open(till_file, "wb") as f:
            tomli_w.dump({"till": {"PENNY": 0.5}}, f)

        result = runner.invoke(app, ["change", "19.50", "20", "--till", str(till_file)])

        assert result.exit_code == 0
        assert "CLOSED" in result.output

    def test_invalid_price(self, saved_till: Till) -> None:
        """Should reject a price that is not a number."""
        result = runner.invoke(app, ["change", "free", "20"])

        assert result.exit_code == 1
        assert "Invalid amount" in result.output

    def test_missing_config(self, config_path: Path) -> None:
        """Should fail with a hint to run init."""
        result = runner.invoke(app, ["change", "1", "2"])

        assert result.exit_code == 1
        assert "cashdrawer init" in result.output

    def test_invalid_price_checked_before_config(self, config_path: Path) -> None:
        """Should report a bad price even when there is no config yet."""
        result = runner.invoke(app, ["change", "free", "20"])

        assert result.exit_code == 1
        assert "Invalid amount" in result.output
        assert "Config not found" not in result.output

    def test_saved_till_with_partial_unit(self, config_path: Path) -> None:
        """Should report a till holding part of a coin instead of crashing."""
        config_path.parent.mkdir(parents=True)
        save_config({"till": {"QUARTER": 0.30}}, config_path)

        result = runner.invoke(app, ["change", "0", "0.50"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "not a whole number of QUARTER" in " ".join(result.output.split())

    def test_verbose_flag(self, saved_till: Till) -> None:
        """Should accept the global verbose flag."""
        result = runner.invoke(app, ["-v", "change", "19.50", "20"])

        assert result.exit_code == 0
        assert "OPEN" in result.output
