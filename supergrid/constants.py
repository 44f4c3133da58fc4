# supergrid/constants.py

"""
Constants shared by the results post-processing modules.

Units follow the model: capacity in GW, electricity in GWh per time step,
system cost in M€, demand in GW per time step.
"""

# Column label appended to per-region tables for the all-region sum
TOTAL = "TOTAL"

# Chart selector drawing every region as its own bar
BARS = "BARS"

# techtype symbol marking storage technologies
STORAGE = "storage"

# Storage technology with a charging variable and overlays in dispatch charts
BATTERY = "battery"

# GWh -> TWh
GWH_PER_TWH = 1000

# M€/GWh -> €/MWh
EUR_PER_MWH_PER_MEUR_PER_GWH = 1000

# Default archive file for stored runs
DEFAULT_RESULTSFILE = "results.zip"

# Technology whose class limits come from the hydrocapacity parameter
HYDRO = "hydro"
