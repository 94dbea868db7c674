# backend/inventory/scripts/build_charts.py
"""
Pulls the stats endpoints of a running API and writes PNG charts:
  - chart_category_value.png   : inventory value per category
  - chart_fast_moving.png      : top OUT quantities per part

    API_BASE=http://127.0.0.1:8000 python -m inventory.scripts.build_charts
"""
import os
import logging
from pathlib import Path

import requests
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[3]
OUT = Path(os.getenv("REPORT_OUTPUT_DIR", ROOT / "report_outputs"))


def get_data(api_base: str, path: str, params: dict | None = None):
    r = requests.get(f"{api_base.rstrip('/')}{path}", params=params, timeout=15)
    r.raise_for_status()
    body = r.json()
    if not body.get("success"):
        raise RuntimeError(f"{path} failed: {body.get('error')}")
    return body.get("data") or []


def category_frame(rows: list) -> pd.DataFrame:
    """Categories sorted by value, with their share of the total value in percent."""
    df = pd.DataFrame(rows, columns=["categoryId", "categoryName", "partCount", "totalValue", "lowStockCount"])
    if df.empty:
        return df.assign(valuePct=pd.Series(dtype=float))
    df = df.sort_values(["totalValue", "categoryId"], ascending=[False, True]).reset_index(drop=True)
    total = df["totalValue"].sum() or 1
    df["valuePct"] = df["totalValue"] / total * 100
    return df


def fast_moving_frame(rows: list) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=["partId", "partName", "totalOutQuantity", "transactionCount", "averagePerMonth"])
    return df.sort_values("totalOutQuantity", ascending=False, kind="stable").reset_index(drop=True)


def plot_category_value(df: pd.DataFrame, path: Path) -> None:
    plt.figure(figsize=(9, 5))
    plt.bar(df["categoryName"], df["totalValue"])
    plt.ylabel("Inventory value")
    plt.xticks(rotation=25, ha="right")
    plt.title("Inventory value per category")
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()


def plot_fast_moving(df: pd.DataFrame, path: Path) -> None:
    plt.figure(figsize=(9, 5))
    plt.barh(df["partName"][::-1], df["totalOutQuantity"][::-1])
    plt.xlabel("Total OUT quantity")
    plt.title("Fast-moving parts")
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()


def run(api_base: str, out_dir: Path = OUT, limit: int = 10) -> list:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    cats = category_frame(get_data(api_base, "/api/stats/categories"))
    if not cats.empty:
        plot_category_value(cats, out_dir / "chart_category_value.png")
        written.append(out_dir / "chart_category_value.png")

    fast = fast_moving_frame(get_data(api_base, "/api/transactions/fast-moving", {"limit": limit}))
    if not fast.empty:
        plot_fast_moving(fast, out_dir / "chart_fast_moving.png")
        written.append(out_dir / "chart_fast_moving.png")

    for p in written:
        logger.info("Chart written: %s", p)
    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(os.getenv("API_BASE", "http://127.0.0.1:8000"))
