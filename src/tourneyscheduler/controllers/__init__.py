"""Controllers operating on tournaments: scheduling, results and standings."""
