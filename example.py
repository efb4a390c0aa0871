#!/usr/bin/env python3
"""
Example usage of the bitlife package.
"""

from bitlife import BoundaryPolicy, GameSession, PatternLibrary
from bitlife.frontends import RenderOptions, render_grid


def main():
    """Demonstrate programmatic usage of the bitlife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    options = RenderOptions("O", ".")

    with GameSession(10, 10, BoundaryPolicy.TORUS) as session:
        glider.apply_to_grid(session.current_grid(), offset_x=4, offset_y=4)

        print("Initial state:")
        print(render_grid(session.current_grid(), options))
        print(f"Population: {session.population}")
        print()

        for _ in range(8):
            session.step()
            print(f"Generation {session.generation}:")
            print(render_grid(session.current_grid(), options))
            print(f"Population: {session.population}")
            print()

        storage = session.current_grid().storage
        print(f"Storage: {storage.shape[0]}x{storage.shape[1]} words for {session.width * session.height} cells")


if __name__ == "__main__":
    main()
