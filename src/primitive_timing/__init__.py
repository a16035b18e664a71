"""
primitive_timing - Running-time measurements of primitive operations

Measures how long array construction, array element access, arithmetic and
conditional logic take across array sizes, and writes the raw samples to CSV
files for later analysis.

    core         - Stopwatch (cumulative elapsed time) and CSVWriter
                   (row-by-row comma-separated output).

    performance  - The four timing routines and their driver, plus helpers
                   that load a finished CSV into pandas and plot it.

    main         - Command-line entry point: YAML configuration, logging
                   setup, and a run of the selected routines.
"""

__version__ = "1.0.0"
