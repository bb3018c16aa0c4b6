import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from autocompletion import SortedIndex
from components.benchmark import BenchConfig, run_benchmark
from components.work_loads import KINDS, WorkLoad

# Configure page
st.set_page_config(
    page_title="Prefix Autocompletion",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource(show_spinner="Building index...")
def build_index(kind, size, seed, casefold):
    pairs = WorkLoad(seed=seed).pairs(kind, size)
    return SortedIndex.from_pairs(pairs, normalize=str.casefold if casefold else None)


def render_value(value):
    if hasattr(value, "_asdict"):
        return " ".join(str(v) for v in value)
    return str(value)


# Main title
st.title("🔎 Sorted-Range Prefix Autocompletion")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Autocomplete", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Workload")
    kind = st.selectbox("Kind", KINDS)
    size = st.select_slider("Items", options=[100, 1_000, 10_000, 100_000], value=10_000)
    seed = st.number_input("Seed", min_value=0, value=42, step=1)
    casefold = st.checkbox("Case-insensitive keys", value=kind in ("words", "people"))

    if st.button("🔄 Rebuild"):
        build_index.clear()
        st.rerun()

try:
    index = build_index(kind, size, int(seed), casefold)
except ValueError as e:
    st.error(f"❌ Could not build workload: {e}")
    st.stop()

# Main content area
if page == "Home":
    st.header("Index Overview")

    st.markdown("""
    Entries are stored sorted by key. A prefix query runs two binary searches
    that find the first and last key starting with the prefix, so even a
    million entries need at most about 40 comparisons.

    **Sections:**
    - 🔎 Autocomplete: type prefixes and inspect the matched ranges
    - ⏱️ Benchmark: query latency against index size, with a linear-scan baseline
    """)

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Entries", f"{index.size():,}")

    with col2:
        st.metric("Distinct Keys", f"{index.distinct_key_count():,}")

    with col3:
        st.metric("Distinct Values", f"{index.distinct_value_count():,}")

    with col4:
        st.metric("Sorted", "yes" if index.validate() else "no")

    st.subheader("First entries")
    st.dataframe(
        pd.DataFrame(
            [(k, render_value(v)) for k, v in index.entries[:50]],
            columns=["key", "value"]
        ),
        use_container_width=True
    )

elif page == "Autocomplete":
    st.header("🔎 Autocomplete")

    st.markdown("Separate prefixes with spaces; a value must match **all** of them.")
    text = st.text_input("Prefixes", value="")
    prefixes = text.split()

    if prefixes:
        results = index.complete_all(prefixes)

        st.subheader("Ranges")
        st.dataframe(
            pd.DataFrame({
                "prefix": prefixes,
                "result": [repr(index.range_search(p)) for p in prefixes],
            }),
            use_container_width=True
        )

        st.subheader(f"Matches ({len(results):,})")
        if results:
            st.dataframe(
                pd.DataFrame({"value": [render_value(v) for v in results[:500]]}),
                use_container_width=True
            )
        else:
            st.info("No value matches every prefix")
    else:
        st.info("👆 Type one or more prefixes")

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    col1, col2, col3 = st.columns(3)
    with col1:
        sizes = st.multiselect(
            "Sizes",
            [1_000, 10_000, 50_000, 100_000, 250_000],
            default=[1_000, 10_000, 100_000]
        )
    with col2:
        prefix_len = st.slider("Prefix length", 1, 6, 2)
        prefixes_per_query = st.slider("Prefixes per query", 1, 3, 1)
    with col3:
        num_queries = st.number_input("Queries per size", min_value=10, value=200, step=10)
        baseline = st.checkbox("Linear-scan baseline", value=True)

    if st.button("▶️ Run"):
        try:
            config = BenchConfig(
                kind=kind,
                sizes=sizes,
                num_queries=int(num_queries),
                prefix_len=prefix_len,
                prefixes_per_query=prefixes_per_query,
                baseline=baseline,
                seed=int(seed),
            )
        except ValueError as e:
            st.error(f"❌ {e}")
            st.stop()

        with st.spinner("Running benchmark..."):
            df = run_benchmark(config)
        st.session_state['bench'] = df

    if 'bench' in st.session_state:
        df = st.session_state['bench']

        if (df["mismatches"] > 0).any():
            st.error("❌ Some queries disagree with the linear scan")
        else:
            st.success("✅ All queries agree with the linear scan")

        tab1, tab2, tab3 = st.tabs(["Latency", "Build Time", "Raw Data"])

        with tab1:
            fig = go.Figure()
            fig.add_trace(go.Scatter(x=df["entries"], y=df["query_p50_us"], mode='markers+lines', name='index p50'))
            fig.add_trace(go.Scatter(x=df["entries"], y=df["query_p95_us"], mode='markers+lines', name='index p95'))
            if df["linear_mean_us"].notna().any():
                fig.add_trace(go.Scatter(x=df["entries"], y=df["linear_mean_us"], mode='markers+lines', name='linear mean'))
            fig.update_layout(
                title="Query latency vs entries",
                xaxis_title="Entries",
                yaxis_title="Latency (µs)",
                xaxis_type="log",
                yaxis_type="log"
            )
            st.plotly_chart(fig, use_container_width=True)

        with tab2:
            fig_build = px.bar(
                df,
                x=df["entries"].astype(str),
                y="build_s",
                title="Index build time"
            )
            fig_build.update_layout(xaxis_title="Entries", yaxis_title="Seconds")
            st.plotly_chart(fig_build, use_container_width=True)

        with tab3:
            st.dataframe(df, use_container_width=True)
    else:
        st.info("Press ▶️ Run to time the current workload")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Sorted-Range Prefix Autocompletion
    </div>
    """,
    unsafe_allow_html=True
)
