import sys, os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import matplotlib.pyplot as plt
import numpy as np

from karnaugh.grid import COL_AXIS, ROW_AXIS, KMap
from karnaugh.logic import minimize, verify_formula
from karnaugh.truth_table import parse_truth_table

# ------------------------------- page setup -------------------------------

COLOR_PALETTE = [
    "#e53935", "#1e88e5", "#43a047", "#f39c12",
    "#8e24aa", "#009688", "#6d4c41", "#2e86c1",
]

SAMPLE_TABLE = """A B
0 0 0
0 1 1
1 1 1
1 0 1
"""

st.set_page_config(page_title="K-Map Minimizer", layout="wide")
st.title("🧮 K-Map Minimizer")
st.markdown("---")

uploaded = st.file_uploader("Truth table file (optional):", type=["txt"])
default_text = uploaded.getvalue().decode("utf-8") if uploaded else SAMPLE_TABLE
raw_table = st.text_area(
    "Truth table (first line: variable names, then one 0/1 row per assignment with the outcome last):",
    default_text,
    height=220,
)
show_groups_for = st.radio("Outline groups of:", ["SOP (ones)", "POS (zeros)"], horizontal=True)


# ------------------------------- drawing -------------------------------
def draw_kmap(kmap, groups):
    nrows, ncols = kmap.size_x, kmap.size_y
    fig, ax = plt.subplots(figsize=(1.3 * ncols + 1.2, 1.3 * nrows + 1.2))

    # leave room for the axis labels
    ax.set_xlim(-0.6, ncols)
    ax.set_ylim(-0.6, nrows)
    ax.set_xticks(np.arange(0, ncols + 1))
    ax.set_yticks(np.arange(0, nrows + 1))
    ax.set_xticklabels([])
    ax.set_yticklabels([])
    ax.grid(True, color="#888", linewidth=1)
    ax.invert_yaxis()
    ax.set_facecolor("#fafafa")

    for j, lab in enumerate(kmap.axis_labels(COL_AXIS)):
        ax.text(j + 0.5, -0.25, lab, ha="center", va="center", fontsize=10, color="#333")
    for i, lab in enumerate(kmap.axis_labels(ROW_AXIS)):
        ax.text(-0.25, i + 0.5, lab, ha="right", va="center", fontsize=10, color="#333")

    grid = kmap.as_array()
    for r in range(nrows):
        for c in range(ncols):
            val = grid[r, c]
            if val == 1:
                text, color = "1", "#1f3c88"
            elif val == 0:
                text, color = "0", "#9aa7b7"
            else:
                text, color = "?", "#ff8c32"
            ax.text(c + 0.5, r + 0.5, text, color=color,
                    fontsize=13, ha="center", va="center", weight="bold")

    for i, g in enumerate(groups):
        color = COLOR_PALETTE[i % len(COLOR_PALETTE)]
        # inset each outline a little so overlapping groups stay visible
        inset = 0.06 + 0.04 * (i % 4)
        rect = plt.Rectangle(
            (g.start.y + inset, g.start.x + inset),
            g.size.y - 2 * inset, g.size.x - 2 * inset,
            fill=False, color=color, lw=2.5, ls="-",
        )
        ax.add_patch(rect)
    return fig


# ------------------------------- on click -------------------------------
if st.button("Minimize 🚀"):
    try:
        table = parse_truth_table(raw_table)
        kmap = KMap.from_table(table)
        result = minimize(kmap)

        st.success(f"**SOP:**  \nF = {result.sop or '(none)'}")
        st.info(f"**POS:**  \nF = {result.pos or '(none)'}")

        if not table.is_complete():
            st.warning(
                f"Only {len(table.rows)} of {2 ** len(table.variables)} rows were given; "
                "missing cells do not constrain the groups."
            )

        mismatches = verify_formula(kmap, True) + verify_formula(kmap, False)
        steps = (
            f"• variables: {' '.join(table.variables)}\n"
            f"• row axis: {' '.join(kmap.row_variables) or '—'}\n"
            f"• column axis: {' '.join(kmap.col_variables) or '—'}\n"
            f"• SOP groups: {len(result.sop_groups)}\n"
            f"• POS groups: {len(result.pos_groups)}\n"
            f"• rows not reproduced: {len(mismatches)}"
        )
        st.text_area("Details:", steps, height=160)

        if not kmap.empty:
            with st.container():
                st.markdown("### 🗺️ Karnaugh map")
                groups = result.sop_groups if show_groups_for.startswith("SOP") else result.pos_groups
                st.pyplot(draw_kmap(kmap, groups))

    except Exception as e:
        st.error(f"Could not minimize the table:\n{e}")
