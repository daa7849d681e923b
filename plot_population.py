"""Line chart of the hub region's population by year.

Creates: docs/plots/population_trend.png (by default)
"""
import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MaxNLocator
import numpy as np
import pandas as pd

import params
import utils


def load_population(path) -> pd.DataFrame:
    df = pd.read_csv(path)
    missing = {"year", "population"} - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns: {sorted(missing)}")
    df["year"] = pd.to_numeric(df["year"], errors="coerce")
    df["population"] = pd.to_numeric(df["population"], errors="coerce")
    df = df.dropna(subset=["year", "population"])
    df["year"] = df["year"].astype(int)
    if params.POPULATION_YEARS:
        df = df[df["year"].isin(params.POPULATION_YEARS)]
    return df.sort_values("year").reset_index(drop=True)


def y_limits(population: np.ndarray):
    """Lower bound sits POPULATION_Y_PAD above the minimum, upper bound is the maximum."""
    lo = float(population.min()) + params.POPULATION_Y_PAD
    hi = float(population.max())
    if lo >= hi:
        # too little spread for the pad; fall back to the raw extent
        lo = float(population.min())
    if lo == hi:
        lo, hi = lo - 1, hi + 1
    return lo, hi


def plot_population(df: pd.DataFrame, out_path, hub: str = params.HUB_REGION, label_points: bool = True):
    if df.empty:
        raise ValueError("No population rows to plot")
    years = df["year"].to_numpy()
    population = df["population"].to_numpy(dtype=float)

    width_in = (params.CHART_WIDTH + params.MARGIN["left"] + params.MARGIN["right"]) / 100
    height_in = (params.CHART_HEIGHT + params.MARGIN["top"] + params.MARGIN["bottom"]) / 100
    fig, ax = plt.subplots(figsize=(width_in, height_in), constrained_layout=True)

    ax.plot(years, population, color=params.COLORS["line"], linewidth=1.5, zorder=2)
    ax.scatter(years, population, color=params.COLORS["line"], s=25, zorder=3)
    if label_points:
        for x, y in zip(years, population):
            ax.annotate(utils.count_str(y), (x, y), textcoords="offset points", xytext=(0, 7),
                        ha="center", fontsize=6, color="white")

    ax.set_xlim(years.min(), years.max())
    ax.set_ylim(*y_limits(population))
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.xaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{int(v)}"))
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: utils.count_str(v)))
    ax.set_title(f"{hub} Population")
    ax.set_xlabel("Year")
    ax.set_ylabel("Population")
    ax.grid(True, alpha=0.3)

    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    fig.savefig(out_path)
    plt.close(fig)
    print(f"Wrote population plot to {out_path}")
    return out_path


def main(csv_path="data/ca_population.csv", out_path="docs/plots/population_trend.png",
         hub: str = params.HUB_REGION, label_points: bool = True):
    plt.style.use("dark_background")
    df = load_population(csv_path)
    return plot_population(df, out_path, hub=hub, label_points=label_points)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Plot the hub region's population by year")
    parser.add_argument("--csv", default="data/ca_population.csv")
    parser.add_argument("--out", default="docs/plots/population_trend.png")
    parser.add_argument("--hub", default=params.HUB_REGION, help="Region named in the chart title")
    parser.add_argument("--no-labels", dest="label_points", action="store_false", help="Do not label each point")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    main(args.csv, args.out, hub=args.hub, label_points=args.label_points)
