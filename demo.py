"""
AVL Dictionary Demo -- Height growth against the AVL bound, balance tag mix,
lookup depth distribution, and rotation frequency by insertion order.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import sys
from pathlib import Path

_root = str(Path(__file__).resolve().parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from avl_dict import Balance, check_invariants, height, insert, lookup

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [2 ** k for k in range(1, 15)]
ROTATION_SIZE = 4096

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

ORDERS = {
    "ascending": lambda n: np.arange(n),
    "descending": lambda n: np.arange(n)[::-1],
    "random": lambda n: np.random.permutation(n),
    "zigzag": lambda n: np.array([i // 2 if i % 2 == 0 else n - 1 - i // 2 for i in range(n)]),
}


def build(keys):
    tree = None
    for k in keys:
        tree = insert(tree, int(k), int(k))
    return tree


def node_depths(tree):
    depths = []
    stack = [(tree, 1)] if tree is not None else []
    while stack:
        node, depth = stack.pop()
        depths.append(depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return np.array(depths)


def tag_counts(tree):
    counts = {tag: 0 for tag in Balance}
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        counts[node.balance] += 1
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return counts


class RotationCounter(logging.Handler):
    """Tallies the balancer's debug records by rotation kind."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.single = 0
        self.double = 0

    def emit(self, record):
        if record.msg.startswith("single"):
            self.single += 1
        else:
            self.double += 1


# ---------------------------------------------------------------------------
# Example 1: Height Growth vs. AVL Bound
# ---------------------------------------------------------------------------
def example_1_height_growth():
    """Tree height for each insertion order against the theoretical bounds."""
    print("=" * 60)
    print("Example 1: Height Growth vs. AVL Bound")
    print("=" * 60)

    heights = {name: [] for name in ORDERS}
    print(f"\n  {'n':>7} " + " ".join(f"{name:>11}" for name in ORDERS) + f" {'bound':>8}")
    print(f"  {'-' * 60}")
    for n in SIZES:
        for name, order in ORDERS.items():
            tree = build(order(n))
            assert check_invariants(tree) == height(tree)
            heights[name].append(height(tree))
        bound = 1.4405 * np.log2(n + 2) - 0.3277
        print(f"  {n:>7} " + " ".join(f"{heights[name][-1]:>11}" for name in ORDERS) + f" {bound:>8.2f}")

    ns = np.array(SIZES)
    fig, ax = plt.subplots(figsize=(10, 6))
    palette = [COLORS["blue"], COLORS["red"], COLORS["green"], COLORS["purple"]]
    for (name, hs), color in zip(heights.items(), palette):
        ax.plot(ns, hs, "o-", color=color, label=name, markersize=4)
    ax.plot(ns, 1.4405 * np.log2(ns + 2) - 0.3277, "--", color=COLORS["dark"],
            label=r"AVL bound $1.4405\log_2(n+2) - 0.3277$")
    ax.plot(ns, np.ceil(np.log2(ns + 1)), ":", color=COLORS["orange"],
            label=r"perfect tree $\lceil\log_2(n+1)\rceil$")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("number of keys n")
    ax.set_ylabel("height")
    ax.set_title("Height after n single-key insertions")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.savefig(VIZ_DIR / "01_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_height_growth.png")


# ---------------------------------------------------------------------------
# Example 2: Balance Tag Distribution
# ---------------------------------------------------------------------------
def example_2_balance_tags():
    """How many nodes lean each way for different insertion orders."""
    print("\n" + "=" * 60)
    print("Example 2: Balance Tag Distribution")
    print("=" * 60)

    n = 1 << 12
    results = {}
    for name, order in ORDERS.items():
        counts = tag_counts(build(order(n)))
        results[name] = counts
        shares = {tag.name: counts[tag] / n for tag in Balance}
        print(f"  {name:>11}: " + ", ".join(f"{k}={v:.1%}" for k, v in shares.items()))

    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(ORDERS))
    width = 0.25
    for i, (tag, color) in enumerate(zip(Balance, [COLORS["blue"], COLORS["green"], COLORS["red"]])):
        ax.bar(x + (i - 1) * width, [results[name][tag] / n for name in ORDERS],
               width, label=tag.name, color=color)
    ax.set_xticks(x)
    ax.set_xticklabels(list(ORDERS))
    ax.set_ylabel("share of nodes")
    ax.set_title(f"Balance tags after {n} insertions")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.savefig(VIZ_DIR / "02_balance_tags.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_balance_tags.png")


# ---------------------------------------------------------------------------
# Example 3: Lookup Depth
# ---------------------------------------------------------------------------
def example_3_lookup_depth():
    """Comparisons needed per successful lookup in a random 10k-key tree."""
    print("\n" + "=" * 60)
    print("Example 3: Lookup Depth Distribution")
    print("=" * 60)

    n = 10000
    keys = np.random.permutation(n)
    tree = build(keys)
    depths = node_depths(tree)

    probe = np.random.choice(n, size=100, replace=False)
    assert all(lookup(tree, int(k)) == int(k) for k in probe)
    assert lookup(tree, n + 1) is None

    print(f"\n  Keys: {n}, height: {height(tree)}")
    print(f"  Mean depth: {depths.mean():.2f}, max depth: {depths.max()}")
    print(f"  log2(n): {np.log2(n):.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    bins = np.arange(1, depths.max() + 2) - 0.5
    ax.hist(depths, bins=bins, color=COLORS["blue"], edgecolor="white")
    ax.axvline(depths.mean(), color=COLORS["red"], linestyle="--", label=f"mean {depths.mean():.2f}")
    ax.axvline(np.log2(n), color=COLORS["dark"], linestyle=":", label=r"$\log_2 n$")
    ax.set_xlabel("depth (comparisons to find the key)")
    ax.set_ylabel("keys")
    ax.set_title(f"Lookup depth over {n} random keys")
    ax.legend()
    fig.savefig(VIZ_DIR / "03_lookup_depth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_lookup_depth.png")


# ---------------------------------------------------------------------------
# Example 4: Rotation Frequency
# ---------------------------------------------------------------------------
def example_4_rotations():
    """Single vs. double rotations per insertion order, read off the balancer's log."""
    print("\n" + "=" * 60)
    print("Example 4: Rotation Frequency")
    print("=" * 60)

    balancer_log = logging.getLogger("avl_dict.balancer")
    previous_level = balancer_log.level
    balancer_log.setLevel(logging.DEBUG)

    results = {}
    try:
        for name, order in ORDERS.items():
            counter = RotationCounter()
            balancer_log.addHandler(counter)
            try:
                build(order(ROTATION_SIZE))
            finally:
                balancer_log.removeHandler(counter)
            results[name] = (counter.single, counter.double)
            total = counter.single + counter.double
            print(f"  {name:>11}: single={counter.single:>5}, double={counter.double:>5}, "
                  f"per insert={total / ROTATION_SIZE:.3f}")
    finally:
        balancer_log.setLevel(previous_level)

    fig, ax = plt.subplots(figsize=(10, 6))
    x = np.arange(len(results))
    singles = [results[name][0] / ROTATION_SIZE for name in results]
    doubles = [results[name][1] / ROTATION_SIZE for name in results]
    ax.bar(x, singles, 0.5, label="single", color=COLORS["green"])
    ax.bar(x, doubles, 0.5, bottom=singles, label="double", color=COLORS["orange"])
    ax.set_xticks(x)
    ax.set_xticklabels(list(results))
    ax.set_ylabel("rotations per insert")
    ax.set_title(f"Rotations while inserting {ROTATION_SIZE} keys")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    fig.savefig(VIZ_DIR / "04_rotations.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_rotations.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Generate the PDF report from the saved visualizations."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "AVL Tree Ordered Dictionary",
                fontsize=24, fontweight="bold", ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Balance Tags, Height Signals and Rotations",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every node records which subtree is taller. Insertion reports upward whether\n"
            "a subtree grew; a parent that was already leaning toward the grown side is\n"
            "fixed by one single or double rotation, which stops the growth.\n\n"
            "This demo covers:\n"
            "  1. Height growth against the AVL bound for four insertion orders\n"
            "  2. Balance tag distribution\n"
            "  3. Lookup depth distribution\n"
            "  4. Rotation frequency\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.94, "Height Bound", fontsize=20, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)
        lines = [
            (r"Fewest nodes at height $h$: $N(h) = N(h-1) + N(h-2) + 1$, $N(0)=0$, $N(1)=1$", 0.80),
            (r"$N(h) = F_{h+2} - 1 \geq \varphi^{h+2}/\sqrt{5} - 2$", 0.70),
            (r"$\Rightarrow h < 1.4405 \log_2(n + 2) - 0.3277$", 0.60),
            (r"Height from tags: $h(t) = 1 + h(t.\mathrm{right})$ if right-heavy, else $1 + h(t.\mathrm{left})$", 0.45),
        ]
        for text, y in lines:
            ax.text(0.08, y, text, fontsize=13, transform=ax.transAxes)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_height_growth.png": "Example 1: Height Growth vs. AVL Bound",
            "02_balance_tags.png": "Example 2: Balance Tag Distribution",
            "03_lookup_depth.png": "Example 3: Lookup Depth",
            "04_rotations.png": "Example 4: Rotation Frequency",
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

    print(f"  Report saved: report.pdf ({len(viz_files) + 2} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Dictionary Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_height_growth()
    example_2_balance_tags()
    example_3_lookup_depth()
    example_4_rotations()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
