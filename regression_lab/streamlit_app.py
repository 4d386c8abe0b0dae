import os

import altair as alt
import pandas as pd
import streamlit as st

from regression_lab.utils.config import load_config
from regression_lab.utils.errors import RegressionError
from regression_lab.utils.glossary import METRIC_TOOLTIPS
from regression_lab.utils.insights import chart_frame, summary_lines
from regression_lab.utils.pipeline import train

APP_TITLE = "Linear Regression Predictive Model"
CFG = load_config(os.environ.get("REGRESSION_LAB_CONFIG"))
UI = CFG.ui
DECIMALS = CFG.decimals

st.set_page_config(page_title=APP_TITLE, layout="wide")

# ---- Controls ----
with st.sidebar:
    st.markdown(f"### {APP_TITLE}")
    st.caption("NumPy + Streamlit + Altair")
    sample_size = st.slider(
        "Sample size",
        int(UI.sample_size.min), int(UI.sample_size.max), int(UI.sample_size.default),
    )
    noise_level = st.slider(
        "Noise level",
        float(UI.noise_level.min), float(UI.noise_level.max), float(UI.noise_level.default),
        step=float(UI.noise_level.step or 0.05),
    )
    seed_text = st.text_input(
        "Random seed (optional)",
        value="" if UI.seed is None else str(UI.seed),
        help="Leave empty for a fresh dataset on every run; set a number to reproduce one.",
    )
    retrain = st.button("Train model")

st.title(APP_TITLE)

# ---- Train ----
seed = None
if seed_text.strip():
    try:
        seed = int(seed_text)
    except ValueError:
        st.error(f"Seed must be an integer, got `{seed_text}`. Using a random seed instead.")

params = (sample_size, noise_level, seed)
if retrain or st.session_state.get("params") != params or "run" not in st.session_state:
    try:
        st.session_state["run"] = train(sample_size, noise_level, seed=seed, config=CFG.generator)
        st.session_state["params"] = params
    except RegressionError as e:
        # keep the last good run on screen
        st.error(f"Training failed: {e}")

run = st.session_state.get("run")
if run is None:
    st.stop()

model, metrics = run.model, run.metrics

# -------- Model parameters --------
st.subheader("Model Parameters")
c1, c2 = st.columns(2)
c1.metric("Slope (m)", f"{model.slope:.{DECIMALS}f}")
c2.metric("Intercept (b)", f"{model.intercept:.{DECIMALS}f}")
st.markdown(f"**Equation:** {model.equation(DECIMALS)}")

# -------- Metrics --------
st.subheader("Performance Metrics")
shown = metrics.rounded(DECIMALS)
tiles = [
    ("MSE", shown["mse"]),
    ("RMSE", shown["rmse"]),
    ("MAE", shown["mae"]),
    ("R²", shown["r2"]),
    ("Adj R²", shown["adjusted_r2"]),
]
for col, (label, value) in zip(st.columns(len(tiles)), tiles):
    col.metric(label, value, help=METRIC_TOOLTIPS.get(label))

with st.expander("Metrics explanation"):
    st.markdown("\n".join(f"- **{k}:** {v}" for k, v in METRIC_TOOLTIPS.items()))

# -------- Plots --------
df = chart_frame(run)

points = alt.Chart(df).mark_circle(size=30, color="#ef4444").encode(
    x=alt.X("x:Q", title="X (Feature)"),
    y=alt.Y("actual:Q", title="Y (Target)"),
    tooltip=["id:N", "x:Q", "actual:Q", "predicted:Q", "residual:Q"],
)
line = alt.Chart(df).mark_line(color="#3b82f6", strokeWidth=2).encode(x="x:Q", y="predicted:Q")

st.subheader("Actual vs Predicted Values")
st.altair_chart((points + line).interactive(), use_container_width=True)

resid = alt.Chart(df).mark_circle(color="#8884d8").encode(
    x=alt.X("index:Q", title="Observation Index"),
    y=alt.Y("residual:Q", title="Residuals"),
    tooltip=["index:Q", "residual:Q"],
)
zero = alt.Chart(pd.DataFrame({"y": [0.0]})).mark_rule(color="#ff0000", strokeDash=[5, 5]).encode(y="y:Q")

st.subheader("Residual Plot")
st.altair_chart(resid + zero, use_container_width=True)

# -------- Summary & download --------
with st.expander("Model Summary", expanded=True):
    st.markdown("\n\n".join(summary_lines(run, DECIMALS)))

st.download_button(
    "Download predictions as CSV",
    data=run.predictions.to_frame().to_csv(index=False).encode("utf-8"),
    file_name="predictions.csv",
    mime="text/csv",
)
