"""Tests for the CLI frontend."""

from io import StringIO
from unittest.mock import patch

from bitlife.constants import ANIMATION_TITLE
from bitlife.core.grid import BoundaryPolicy
from bitlife.frontends.cli import (
    BitLifeCLI,
    apply_defaults,
    create_parser,
    main,
    validate_args,
)


def parse(argv):
    args = create_parser().parse_args(argv)
    apply_defaults(args)
    return args


class TestBitLifeCLI:
    """Test cases for building sessions from arguments."""

    def test_initialization(self):
        """Test CLI initialization."""
        cli = BitLifeCLI()
        assert cli.pattern_library is not None
        assert len(cli.pattern_library.list_patterns()) > 0

    def test_build_random_session(self):
        """Test the default demo builds a random torus."""
        session = BitLifeCLI().build_session(parse(["--seed", "3"]))

        assert (session.width, session.height) == (20, 40)
        assert session.policy is BoundaryPolicy.TORUS
        assert session.population > 0

    def test_build_random_session_reproducible(self):
        """Test the seed flag makes random grids repeatable."""
        cli = BitLifeCLI()
        first = cli.build_session(parse(["--seed", "8", "-W", "6", "-H", "6"]))
        second = cli.build_session(parse(["--seed", "8", "-W", "6", "-H", "6"]))

        assert first.current_grid() == second.current_grid()

    def test_build_glider_gun_session(self):
        """Test the glider gun demo."""
        session = BitLifeCLI().build_session(parse(["--demo", "glider-gun"]))

        assert session.policy is BoundaryPolicy.ALL_OFF
        assert session.population == 36

    def test_build_pattern_session_centered(self):
        """Test named patterns are centered by default."""
        session = BitLifeCLI().build_session(parse(["--pattern", "Block", "-W", "6", "-H", "6"]))
        grid = session.current_grid()

        assert session.population == 4
        assert grid.get(2, 2) and grid.get(2, 3) and grid.get(3, 2) and grid.get(3, 3)

    def test_build_pattern_session_offset(self):
        """Test explicit pattern offsets."""
        args = parse(["--pattern", "Block", "-W", "6", "-H", "6", "--pattern-x", "0", "--pattern-y", "4"])
        grid = BitLifeCLI().build_session(args).current_grid()

        assert grid.get(0, 4) and grid.get(1, 5)

    def test_pattern_session_bounded_by_default(self):
        """Test named patterns run on a bounded grid unless told otherwise."""
        session = BitLifeCLI().build_session(parse(["--pattern", "Glider", "-W", "8", "-H", "8"]))
        assert session.policy is BoundaryPolicy.ALL_OFF

        session = BitLifeCLI().build_session(parse(["--pattern", "Glider", "-W", "8", "-H", "8", "-b", "torus"]))
        assert session.policy is BoundaryPolicy.TORUS

    def test_boundary_override(self):
        """Test the boundary flag overrides the demo policy."""
        session = BitLifeCLI().build_session(parse(["--demo", "glider-gun", "-b", "torus"]))
        assert session.policy is BoundaryPolicy.TORUS

    def test_list_patterns(self):
        """Test pattern listing output."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            BitLifeCLI().list_patterns()

        output = mock_stdout.getvalue()
        assert "Available patterns:" in output
        assert "Glider" in output
        assert "Gosper Glider Gun: 9x36, 36 cells" in output


class TestArguments:
    """Test cases for argument parsing and validation."""

    def test_parser_defaults(self):
        """Test parser defaults."""
        args = parse([])

        assert args.demo == "random"
        assert args.width == 20
        assert args.height == 40
        assert args.boundary is None
        assert args.delay == 100
        assert args.generations == 0
        assert args.on == "O"
        assert args.off == "."
        assert not args.no_clear
        assert not args.verbose

    def test_validate_args_valid(self):
        """Test valid arguments pass."""
        assert validate_args(parse(["-d", "0", "-n", "5"]))

    def test_validate_args_invalid(self):
        """Test invalid arguments are reported."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert not validate_args(parse(["-d", "-1"]))
            assert not validate_args(parse(["-n", "-2"]))
            assert not validate_args(parse(["--on", "##"]))
            assert not validate_args(parse(["--pattern-x", "-1"]))

        assert "Error: Invalid arguments:" in mock_stdout.getvalue()


class TestMain:
    """Test cases for the main entry point."""

    def test_list_patterns(self):
        """Test --list-patterns exits cleanly."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(["--list-patterns"]) == 0

        assert "Available patterns:" in mock_stdout.getvalue()

    def test_runs_generations(self):
        """Test a bounded run prints frames and exits cleanly."""
        argv = ["--seed", "1", "-W", "4", "-H", "6", "-n", "2", "-d", "0", "--no-clear", "-v"]
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(argv) == 0

        output = mock_stdout.getvalue()
        assert ANIMATION_TITLE in output
        assert "Ran 2 generations" in output
        assert "\033[2J" not in output

    def test_custom_symbols(self):
        """Test custom symbols reach the output."""
        argv = ["--pattern", "Block", "-W", "4", "-H", "4", "-n", "1", "-d", "0", "--no-clear", "--on", "#", "--off", "-"]
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(argv) == 0

        assert "\n----\n-##-\n-##-\n----\n" in mock_stdout.getvalue()

    def test_invalid_dimensions(self):
        """Test negative dimensions are reported as errors."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(["-W", "-1", "-n", "1"]) == 1

        assert "Error:" in mock_stdout.getvalue()

    def test_unknown_pattern(self):
        """Test unknown patterns are reported."""
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(["--pattern", "NonExistent"]) == 1

        assert "Error: Pattern 'NonExistent' not found" in mock_stdout.getvalue()

    def test_pattern_does_not_fit(self):
        """Test a pattern placed off the grid is reported."""
        argv = ["--pattern", "Glider", "-W", "3", "-H", "3", "--pattern-x", "2", "-n", "1"]
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            assert main(argv) == 1

        assert "Error:" in mock_stdout.getvalue()

    def test_invalid_arguments(self):
        """Test invalid arguments fail before running."""
        with patch("sys.stdout", new_callable=StringIO):
            assert main(["-d", "-5"]) == 1

    def test_keyboard_interrupt(self):
        """Test Ctrl-C stops the animation with an error code."""
        with patch("bitlife.frontends.cli.run_animation", side_effect=KeyboardInterrupt), patch(
            "sys.stdout", new_callable=StringIO
        ) as mock_stdout:
            assert main(["-W", "4", "-H", "4"]) == 1

        assert "Simulation interrupted by user" in mock_stdout.getvalue()
