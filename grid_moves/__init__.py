"""Grid-walk puzzle solvers: lattice navigation distance and keypad codes."""
