"""Plot Z(P) isotherms of a gas or mixture for one equation of state."""
from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from rkz.sweep import ResultGrid, evaluate


def plot_grid(grid: ResultGrid, title: str, output: Path) -> None:
    df = grid.to_dataframe()
    fig, ax = plt.subplots(figsize=(7, 4.5))
    for t in df.columns:
        ax.plot(df.index, df[t], label=f"{t:g} °C")
    ax.axhline(1.0, color="grey", lw=0.8, ls="--")
    ax.set_xlabel(df.index.name)
    ax.set_ylabel("Z [-]")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize="small")
    fig.tight_layout()
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=150)
    plt.close(fig)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("gas", help="Gas id or mixture spec, e.g. 'CH4' or '90%%CH4+C2H6'")
    parser.add_argument("--eos", default="pr", help="vdw, rk, srk or pr")
    parser.add_argument("--pressure", default="1:500:5", help="Pressure range in bar, start:stop[:step]")
    parser.add_argument("--temperature", default="-20:80:20", help="Temperature range in °C, start:stop[:step]")
    parser.add_argument("--output", default=Path("z_grid.png"), type=Path, help="Target PNG file")
    args = parser.parse_args()

    grid = evaluate(args.gas, args.eos, args.pressure, args.temperature)
    if not isinstance(grid, ResultGrid):
        raise SystemExit("Give a pressure or temperature range to plot a grid")
    plot_grid(grid, f"{args.gas} ({args.eos})", args.output)
    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
