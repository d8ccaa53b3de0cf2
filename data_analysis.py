import math
import os
import shutil
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression

INPUT_CSV = "benchmark_results.csv"
OUT_DIR = "analysis_figures"

MODEL_PALETTE = ["#FFC759", "#D94B6A", "#607196", "#BABFD1", "#87A878"]


def ensure_dir(path):
    Path(path).mkdir(parents=True, exist_ok=True)


def clear_dir(path):
    if os.path.exists(path):
        shutil.rmtree(path)
    ensure_dir(path)


def loglog_regression(x, y):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = (x > 0) & (y > 0)
    if mask.sum() < 2:
        return {"slope": np.nan, "intercept": np.nan, "r2": np.nan, "mask": mask}
    lx = np.log(x[mask]).reshape(-1, 1)
    ly = np.log(y[mask])
    reg = LinearRegression().fit(lx, ly)
    return {
        "slope": float(reg.coef_[0]),
        "intercept": float(reg.intercept_),
        "r2": float(reg.score(lx, ly)),
        "mask": mask
    }


def theory_fit(n, y):
    """
    Least-squares fit of y = a * n^2 log n + b, the expected work of
    Karger-Stein contraction.
    """
    n = np.asarray(n, dtype=float)
    y = np.asarray(y, dtype=float)
    n = np.maximum(n, 2.0)
    theory = (n ** 2) * np.log(n)
    mask = ~np.isnan(y)
    if mask.sum() < 2:
        return theory, np.nan, np.nan, np.nan
    X = theory[mask].reshape(-1, 1)
    Y = y[mask].reshape(-1, 1)
    reg = LinearRegression().fit(X, Y)
    return theory, float(reg.coef_[0][0]), float(reg.intercept_[0]), float(reg.score(X, Y))


def save_fig(fig, out_path, dpi=150):
    fig.savefig(out_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)


def style_axes(ax):
    ax.grid(False)
    for spine in ax.spines.values():
        spine.set_color("black")
        spine.set_linewidth(1.0)
    ax.set_facecolor("white")


def plot_loglog_with_fit(ax, x, y, res, color, marker='x', label=None):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = res["mask"]
    ax.scatter(x[mask], y[mask], marker=marker, s=40, edgecolor='k', linewidth=0.3,
               alpha=0.85, color=color, label=label, zorder=3)

    if mask.sum() > 1 and not math.isnan(res["slope"]):
        order = np.argsort(x[mask])
        xs = x[mask][order]
        ys = np.exp(res["intercept"] + res["slope"] * np.log(xs))
        ax.plot(xs, ys, linestyle="--", linewidth=2.0, alpha=0.95, color=color, zorder=4,
                label=f"fit slope={res['slope']:.3f} R2={res['r2']:.3f}")


def analyse(input_csv=INPUT_CSV, out_dir=OUT_DIR) -> pd.DataFrame:
    """
    Fits runtime scaling per model from a `BenchmarkRunner` CSV and writes
    figures plus `loglog_summary.csv` into `out_dir`.

    Returns:
        pd.DataFrame: one row per model with log-log slope and the n^2 log n
        fit quality.
    """
    if not os.path.exists(input_csv):
        raise FileNotFoundError(f"Input CSV not found at '{input_csv}'.")
    clear_dir(out_dir)
    df = pd.read_csv(input_csv)

    per_n = (df.groupby(["model", "n"], as_index=False)
               .agg(time_s=("time_s", "mean"), success_rate=("correct", "mean")))

    summary_rows = []
    fig_all, ax_all = plt.subplots(figsize=(10, 7), constrained_layout=True)
    ax_all.set_xscale("log")
    ax_all.set_yscale("log")

    for idx, model in enumerate(per_n["model"].unique()):
        sub = per_n[per_n["model"] == model].sort_values("n").reset_index(drop=True)
        color = MODEL_PALETTE[idx % len(MODEL_PALETTE)]

        res = loglog_regression(sub["n"].values, sub["time_s"].values)
        theory, coef, intercept, r2 = theory_fit(sub["n"].values, sub["time_s"].values)
        summary_rows.append({
            "model": model,
            "slope": res["slope"],
            "r2": res["r2"],
            "theory_coef": coef,
            "theory_r2": r2,
            "success_rate": float(sub["success_rate"].mean()),
        })

        plot_loglog_with_fit(ax_all, sub["n"].values, sub["time_s"].values, res, color,
                             marker="o", label=model)

        fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
        ax.plot(sub["n"], sub["time_s"], marker="o", label="measured",
                color=color, linewidth=2, alpha=0.95)
        if not math.isnan(coef):
            ax.plot(sub["n"], coef * theory + intercept, linestyle="--", linewidth=2.0,
                    label=f"n^2 log n (fit), R2={r2:.3f}", color="k", alpha=0.85)
        ax.set_xlabel("Components")
        ax.set_ylabel("Time (s)")
        ax.set_title(f"Time vs components ({model})")
        style_axes(ax)
        ax.legend(frameon=True)
        save_fig(fig, os.path.join(out_dir, f"{model}_time_vs_components.png"))

    ax_all.set_xlabel("Components (log scale)")
    ax_all.set_ylabel("Mean time (s, log scale)")
    ax_all.set_title("Time vs components for all models (log-log)")
    style_axes(ax_all)
    ax_all.legend(frameon=True)
    save_fig(fig_all, os.path.join(out_dir, "all_models_loglog.png"))

    summary_df = pd.DataFrame(summary_rows)
    summary_df.to_csv(os.path.join(out_dir, "loglog_summary.csv"), index=False)
    return summary_df


def main():
    summary = analyse()
    print(summary.to_string(index=False))
    print(f"Outputs written to folder: {OUT_DIR}")


if __name__ == "__main__":
    main()
