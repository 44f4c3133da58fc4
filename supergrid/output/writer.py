"""
supergrid/output/writer.py

Writes analysis tables to CSV files in an output directory.
"""
import os
import pandas as pd
from typing import Dict

class OutputWriter:
    """
    Writes labelled tables (DataFrames) to CSV files in the output directory.
    """
    def __init__(self, output_dir: str):
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

    def write_csv(self, name: str, df: pd.DataFrame, index: bool = False) -> str:
        """Writes a DataFrame to ``<name>.csv``; row labels only when *index* is set."""
        path = os.path.join(self.output_dir, f"{name}.csv")
        df.to_csv(path, index=index)
        return path

    def write_multiple(self, data: Dict[str, pd.DataFrame], index: bool = False) -> Dict[str, str]:
        """Writes multiple DataFrames to CSV files. Returns dict of file paths."""
        return {name: self.write_csv(name, df, index=index) for name, df in data.items()}

    def write_analysis(self, analysis) -> Dict[str, str]:
        """Writes the annual electricity, capacity and transmission capacity tables of an Analysis."""
        tables = {
            "annual_electricity": analysis.annualelec,
            "capacity": analysis.capac,
            "transmission_capacity": analysis.tcapac,
        }
        return self.write_multiple(tables, index=True)
