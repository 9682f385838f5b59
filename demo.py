"""
Order Heap Demo -- Kitchen order walkthrough, growth behaviour, and per-operation cost.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from priority_heap import PriorityHeap
from order import Order, OrderIdSequence

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

KITCHEN_ORDERS = [
    ("Mac & Cheese", 8),
    ("Ham Sandwich", 13),
    ("Pizza Rolls", 5),
    ("Chicken Tenders", 18),
    ("Soft Stix", 14),
    ("Cheese Sandwich", 15),
]
INSERT_SEQUENCE = [5, 1, 0, 2, 3, 4]

GROWTH_N = 200
TIMING_SIZES = [2 ** k for k in range(6, 15)]


def _tree_positions(n):
    """x, y coordinates for the first n slots of a heap laid out as a tree."""
    xs, ys = [], []
    for i in range(n):
        depth = int(np.floor(np.log2(i + 1)))
        slot = i + 1 - 2 ** depth
        xs.append((slot + 0.5) / 2 ** depth)
        ys.append(-depth)
    return np.array(xs), np.array(ys)


def _draw_heap(ax, heap, title):
    labels = heap.render().split(", ") if heap else []
    n = heap.size()
    xs, ys = _tree_positions(n)
    for i in range(1, n):
        parent = (i - 1) // 2
        ax.plot([xs[i], xs[parent]], [ys[i], ys[parent]], color="gray", lw=1, zorder=1)
    ax.scatter(xs, ys, s=1400, color=COLORS["blue"], edgecolor="white", zorder=2)
    for i in range(n):
        ax.text(xs[i], ys[i], labels[i], ha="center", va="center",
                fontsize=8, color="white", fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(min(ys, default=0) - 0.6, 0.6)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Kitchen Order Walkthrough
# ---------------------------------------------------------------------------
def example_1_order_walkthrough():
    """Insert kitchen orders one by one and serve them longest-prep first."""
    print("=" * 60)
    print("Example 1: Kitchen Order Walkthrough")
    print("=" * 60)

    ids = OrderIdSequence()
    orders = [Order.create(dish, prep, ids) for dish, prep in KITCHEN_ORDERS]
    heap = PriorityHeap(len(orders))

    fig, axes = plt.subplots(2, 3, figsize=(18, 10))
    for step, idx in enumerate(INSERT_SEQUENCE):
        order = orders[idx]
        heap.insert(order)
        print(f"  insert {order} {order.dish:<16} -> [{heap.render()}]")
        _draw_heap(axes.flat[step], heap, f"After inserting {order} ({order.dish})")

    assert heap.render() == "1004(18), 1006(15), 1005(14), 1003(5), 1002(13), 1001(8)"

    served = []
    while not heap.is_empty():
        served.append(heap.remove_best())
    print(f"\n  Served: {', '.join(f'{o.dish} ({o.prep_time})' for o in served)}")
    prep_times = [o.prep_time for o in served]
    assert prep_times == sorted(prep_times, reverse=True)

    fig.suptitle("Heap Shape After Each Insert (array order = level order)",
                 fontsize=14, fontweight="bold")
    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_order_walkthrough.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/01_order_walkthrough.png")


# ---------------------------------------------------------------------------
# Example 2: Growth
# ---------------------------------------------------------------------------
def example_2_growth():
    """Insert past the initial capacity and check nothing is lost."""
    print("\n" + "=" * 60)
    print("Example 2: Capacity Growth")
    print("=" * 60)

    np.random.seed(SEED)
    priorities = np.random.randint(0, 1000, size=GROWTH_N)
    heap = PriorityHeap(1)

    sizes, capacities = [], []
    for p in priorities:
        heap.insert(int(p))
        sizes.append(heap.size())
        capacities.append(heap.capacity())

    drained = np.array([heap.remove_best() for _ in range(GROWTH_N)])
    expected = np.sort(priorities)[::-1]
    match = np.array_equal(drained, expected)
    print(f"  Inserted {GROWTH_N} priorities into a capacity-1 heap")
    print(f"  Final capacity: {capacities[-1]}")
    print(f"  Resizes: {len(set(capacities)) - 1}")
    print(f"  Drain matches np.sort descending: {match}")
    assert match, "Growth lost or reordered elements"

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].step(sizes, capacities, where="post", color=COLORS["orange"], label="capacity")
    axes[0].plot(sizes, sizes, color=COLORS["dark"], ls="--", label="size")
    axes[0].set_xlabel("Live elements")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity Doubles on Overflow", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(drained, color=COLORS["green"], lw=2, label="remove_best order")
    axes[1].plot(expected, color=COLORS["red"], ls=":", lw=2, label="np.sort descending")
    axes[1].set_xlabel("Removal step")
    axes[1].set_ylabel("Priority")
    axes[1].set_title("Extraction Order After Growth", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/02_growth.png")


# ---------------------------------------------------------------------------
# Example 3: Per-Operation Cost
# ---------------------------------------------------------------------------
def example_3_operation_cost():
    """Time insert and remove_best against heap size."""
    print("\n" + "=" * 60)
    print("Example 3: Per-Operation Cost")
    print("=" * 60)

    np.random.seed(SEED)
    insert_us, remove_us = [], []
    for n in TIMING_SIZES:
        values = np.random.rand(n).tolist()
        heap = PriorityHeap(16)

        start = time.perf_counter()
        for v in values:
            heap.insert(v)
        insert_us.append((time.perf_counter() - start) / n * 1e6)

        start = time.perf_counter()
        while not heap.is_empty():
            heap.remove_best()
        remove_us.append((time.perf_counter() - start) / n * 1e6)

        print(f"  n={n:>6}: insert {insert_us[-1]:6.2f} us/op, "
              f"remove_best {remove_us[-1]:6.2f} us/op")

    log_n = np.log2(TIMING_SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(TIMING_SIZES, insert_us, "o-", color=COLORS["blue"], label="insert")
    axes[0].plot(TIMING_SIZES, remove_us, "s-", color=COLORS["purple"], label="remove_best")
    axes[0].set_xscale("log", base=2)
    axes[0].set_xlabel("Heap size n")
    axes[0].set_ylabel("Microseconds per operation")
    axes[0].set_title("Average Cost per Operation", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    slope, intercept = np.polyfit(log_n, remove_us, 1)
    axes[1].scatter(log_n, remove_us, color=COLORS["purple"], label="remove_best")
    axes[1].plot(log_n, slope * log_n + intercept, color=COLORS["dark"], ls="--",
                 label=f"fit: {slope:.2f} us per level")
    axes[1].set_xlabel(r"$\log_2 n$")
    axes[1].set_ylabel("Microseconds per operation")
    axes[1].set_title("remove_best Scales with Tree Height", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_operation_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/03_operation_cost.png")


def generate_pdf_report():
    """Generate PDF report with a title page and one page per visualization."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Order Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Longest Prep Time Served First",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "An array-backed binary max-heap keeps the order with the longest prep\n"
            "time at index 0. Insert appends and percolates up; remove_best moves the\n"
            "last element to the root and percolates down. Both are O(log n).\n\n"
            "This demo covers:\n"
            "  1. Kitchen order walkthrough with the heap drawn after each insert\n"
            "  2. Capacity doubling and extraction order after growth\n"
            "  3. Per-operation timing against tree height\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_order_walkthrough.png": "Example 1: Kitchen Order Walkthrough",
            "02_growth.png": "Example 2: Capacity Growth",
            "03_operation_cost.png": "Example 3: Per-Operation Cost",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Order Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_order_walkthrough()
    example_2_growth()
    example_3_operation_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
