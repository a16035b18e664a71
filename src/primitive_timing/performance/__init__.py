"""
performance - Timing routines for primitive operations

    timing   - Sweeps array sizes and records construction, access,
               arithmetic and logic running times to CSV files.

    results  - Reads a recorded CSV back into a DataFrame and renders the
               raw samples as a scatter plot.
"""
