"""
Kepler: point masses under mutual Newtonian gravity, advanced one tick at a time.

The engine lives here; the interactive pygame viewer is kepler_sim.py at the repository root.
"""
