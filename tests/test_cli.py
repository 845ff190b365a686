"""Tests for the command line and terminal rendering."""

import json

import pytest
from decimal import Decimal

from fundwarrior.cli import EXIT_OK, EXIT_STORAGE_ERROR, EXIT_USER_ERROR, main
from fundwarrior.config import get_settings
from fundwarrior.display import EMPTY_LEDGER_MESSAGE, format_dollars, format_fund, format_funds
from fundwarrior.models.fund import Fund


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def config_file(tmp_path, data_dir, monkeypatch):
    for name in ("FUND_DATA_DIR", "FUND_FUND_FILE_NAME", "FUND_ALLOW_NEGATIVE_BALANCE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    path = tmp_path / "config.env"
    path.write_text(f"FUND_DATA_DIR={data_dir}\n")
    yield str(path)
    get_settings.cache_clear()


def fund(config_file, *args):
    return main(["--config", config_file, *args])


class TestCommands:
    """Tests for each fund command."""

    def test_no_args_on_first_run(self, config_file, capsys):
        """Test that a bare `fund` on a new install lists nothing."""
        assert fund(config_file) == EXIT_OK
        assert EMPTY_LEDGER_MESSAGE in capsys.readouterr().out

    def test_new_prints_fund(self, config_file, capsys):
        """Test `fund new` prints the created fund."""
        assert fund(config_file, "new", "grocery", "100.00", "150.00") == EXIT_OK
        out = capsys.readouterr().out
        assert "grocery:" in out
        assert "$100.00" in out
        assert "$50.00 away from goal" in out

    def test_new_defaults_amounts(self, config_file, data_dir):
        """Test `fund new` with only a name."""
        assert fund(config_file, "new", "rainy") == EXIT_OK
        data = json.loads((data_dir / "funds.json").read_text())
        assert data["funds"] == [{"name": "rainy", "balance": "0.00", "goal": "0.00"}]

    def test_deposit_and_spend(self, config_file, data_dir, capsys):
        """Test deposit and spend update the file."""
        fund(config_file, "new", "car", "500.00", "500.00")
        assert fund(config_file, "deposit", "car", "50.00") == EXIT_OK
        assert fund(config_file, "spend", "car", "25.00") == EXIT_OK
        data = json.loads((data_dir / "funds.json").read_text())
        assert Decimal(data["funds"][0]["balance"]) == Decimal("525.00")
        assert "goal reached" in capsys.readouterr().out

    def test_list_one_and_info_alias(self, config_file, capsys):
        """Test `fund list <name>` and the `info` alias."""
        fund(config_file, "new", "rent", "1.00")
        fund(config_file, "new", "car", "2.00")
        capsys.readouterr()

        assert fund(config_file, "list", "car") == EXIT_OK
        out = capsys.readouterr().out
        assert "car:" in out
        assert "rent:" not in out

        assert fund(config_file, "info") == EXIT_OK
        out = capsys.readouterr().out
        assert out.index("rent:") < out.index("car:")
        assert "total:" in out

    def test_rename(self, config_file, capsys):
        """Test `fund rename`."""
        fund(config_file, "new", "test", "1.00")
        assert fund(config_file, "rename", "test", "success") == EXIT_OK
        assert fund(config_file, "list", "test") == EXIT_USER_ERROR
        assert "not found" in capsys.readouterr().err


class TestExitCodes:
    """Tests for error reporting."""

    def test_insufficient_funds(self, config_file, data_dir, capsys):
        """Test overspending exits 1 and leaves the file unchanged."""
        fund(config_file, "new", "grocery", "10.00")
        before = (data_dir / "funds.json").read_text()
        assert fund(config_file, "spend", "grocery", "10.01") == EXIT_USER_ERROR
        assert "error:" in capsys.readouterr().err
        assert (data_dir / "funds.json").read_text() == before

    @pytest.mark.parametrize("args", [
        ("new", "has space", "10.00", "10.00"),
        ("new", "car", "10", "10.00"),
        ("new", "car", "-5.00"),
        ("deposit", "car", "0.00"),
        ("spend", "nonexistent", "1.00"),
    ])
    def test_user_errors(self, config_file, args):
        """Test that user mistakes exit 1."""
        fund(config_file, "new", "car")
        assert fund(config_file, *args) == EXIT_USER_ERROR

    def test_duplicate(self, config_file, capsys):
        """Test creating a fund twice."""
        fund(config_file, "new", "car")
        assert fund(config_file, "new", "car") == EXIT_USER_ERROR
        assert "already exists" in capsys.readouterr().err

    def test_corrupt_file_is_storage_error(self, config_file, data_dir):
        """Test that a broken fund file exits 2."""
        data_dir.mkdir(parents=True)
        (data_dir / "funds.json").write_text("{not json")
        assert fund(config_file) == EXIT_STORAGE_ERROR

    def test_non_utf8_file_is_storage_error(self, config_file, data_dir, capsys):
        """Test that a fund file with invalid bytes exits 2."""
        data_dir.mkdir(parents=True)
        (data_dir / "funds.json").write_bytes(b"\xff\xfe\x00garbage")
        assert fund(config_file, "list") == EXIT_STORAGE_ERROR
        assert "not a valid fund file" in capsys.readouterr().err

    @pytest.mark.parametrize("args", [
        ("new", "big", "1" * 30 + ".00", "0.00"),
        ("deposit", "car", "1" * 30 + ".00"),
    ])
    def test_huge_amounts_are_user_errors(self, config_file, args, capsys):
        """Test that amounts past the supported range exit 1."""
        fund(config_file, "new", "car")
        assert fund(config_file, *args) == EXIT_USER_ERROR
        assert "error:" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        """Test that a missing --config file exits 1."""
        get_settings.cache_clear()
        assert main(["--config", str(tmp_path / "nope.env")]) == EXIT_USER_ERROR
        assert "config file not found" in capsys.readouterr().err

    def test_unknown_command(self, config_file):
        """Test that usage errors exit 1, not 2."""
        with pytest.raises(SystemExit) as exc_info:
            fund(config_file, "bogus")
        assert exc_info.value.code == EXIT_USER_ERROR

    def test_verbose_logs_to_stderr(self, config_file, capsys):
        """Test that --verbose writes structured events to stderr."""
        fund(config_file, "-v", "new", "car", "1.00")
        captured = capsys.readouterr()
        assert "ledger_event" in captured.err
        assert "ledger_event" not in captured.out


class TestDisplay:
    """Tests for terminal rendering."""

    def test_format_dollars(self):
        """Test dollar formatting."""
        assert format_dollars(Decimal("1")) == "$1.00"
        assert format_dollars(Decimal("0.05")) == "$0.05"
        assert format_dollars(Decimal("1234.50")) == "$1234.50"
        assert format_dollars(Decimal("-20.00")) == "-$20.00"

    def test_format_fund(self):
        """Test the fund line layout."""
        line = format_fund(Fund(name="car", balance=Decimal("5.00"), goal=Decimal("10.00")))
        assert line == "      car:  $5.00   / $10.00   -- $5.00 away from goal"

    def test_format_funds_empty(self):
        """Test rendering an empty ledger."""
        assert format_funds([]) == EMPTY_LEDGER_MESSAGE

    def test_single_fund_has_no_total(self):
        """Test that one fund is rendered without a total line."""
        assert "total:" not in format_funds([Fund(name="car")])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
