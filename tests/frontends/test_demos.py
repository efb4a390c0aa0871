"""Tests for the demo sessions."""

from unittest.mock import patch

import numpy as np
import pytest

from bitlife.core.errors import OutOfBoundsError
from bitlife.core.grid import BoundaryPolicy
from bitlife.core.session import GameSession
from bitlife.frontends.demos import (
    create_glider_gun_session,
    create_pattern_session,
    create_random_session,
)


class TestDemos:
    """Test cases for the demo session builders."""

    def test_random_session_defaults(self):
        """Test the random demo is a populated 20x40 torus."""
        session = create_random_session(rng=np.random.default_rng(0))

        assert (session.width, session.height) == (20, 40)
        assert session.policy is BoundaryPolicy.TORUS
        assert session.population > 0

    def test_random_session_reproducible(self):
        """Test seeded random demos match."""
        first = create_random_session(8, 8, rng=np.random.default_rng(21))
        second = create_random_session(8, 8, rng=np.random.default_rng(21))

        assert first.current_grid() == second.current_grid()

    def test_glider_gun_session(self):
        """Test the glider gun demo is a bounded 20x40 grid holding the gun."""
        session = create_glider_gun_session()

        assert (session.width, session.height) == (20, 40)
        assert session.policy is BoundaryPolicy.ALL_OFF
        assert session.population == 36
        assert session.current_grid().get(1, 25)
        assert session.current_grid().get(9, 14)

    def test_glider_gun_runs(self):
        """Test the glider gun keeps producing live cells."""
        session = create_glider_gun_session()
        session.run(30)

        assert session.population > 0

    def test_pattern_session_unknown(self):
        """Test unknown pattern names raise KeyError."""
        with pytest.raises(KeyError):
            create_pattern_session("NonExistent")

    def test_pattern_session_does_not_fit(self):
        """Test a pattern that does not fit raises and releases the session."""
        with patch.object(GameSession, "destroy", autospec=True) as destroy:
            with pytest.raises(OutOfBoundsError):
                create_pattern_session("Gosper Glider Gun", 5, 5)

        destroy.assert_called_once()
