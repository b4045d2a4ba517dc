from __future__ import annotations

import json

import pandas as pd
import plotly.express as px
import streamlit as st

from wdi import (
    WDIError,
    fetch_indicators,
    reset_country_cache,
    reset_indicator_cache,
    search,
)
from wdi.parsers import value_column
from wdi.search import COUNTRY_FIELDS, INDICATOR_FIELDS

st.set_page_config(page_title="WDI Explorer", layout="wide")

st.sidebar.title("WDI Explorer")
page = st.sidebar.radio("Page", ["Search", "Fetch", "Export"])

if st.sidebar.button("Reset country cache"):
    reset_country_cache()
    st.sidebar.success("Countries will be downloaded again")
if st.sidebar.button("Reset indicator cache"):
    reset_indicator_cache()
    st.sidebar.success("Indicators will be downloaded again")

if page == "Search":
    st.title("Search countries and indicators")
    domain = st.selectbox("Data", ["countries", "indicators"])
    fields = COUNTRY_FIELDS if domain == "countries" else INDICATOR_FIELDS
    field = st.selectbox("Field", fields)
    pattern = st.text_input("Regular expression", value="(?i)united" if domain == "countries" else "(?i)gross national")
    if pattern:
        try:
            hits = search(domain, field, pattern)
        except WDIError as exc:
            st.error(str(exc))
            st.stop()
        st.caption(f"{len(hits)} matches")
        st.dataframe(hits, use_container_width=True)

elif page == "Fetch":
    st.title("Fetch indicators")
    with st.form("fetch"):
        indicator_text = st.text_input("Indicator codes (comma separated)", value="NY.GNP.PCAP.CD")
        country_text = st.text_input("Country codes (comma separated, or all / all_countries)", value="US,BR")
        start_year, end_year = st.slider("Years", min_value=1960, max_value=2030, value=(1990, 2020))
        extra = st.checkbox("Include country metadata", value=False)
        submitted = st.form_submit_button("Fetch")

    if submitted:
        indicators = [s.strip() for s in indicator_text.split(",") if s.strip()]
        countries = [s.strip() for s in country_text.split(",") if s.strip()]
        if countries in (["all"], ["all_countries"]):
            countries = countries[0]
        try:
            df = fetch_indicators(indicators, countries, start_year, end_year, extra=extra, verbose=True)
        except WDIError as exc:
            st.error(str(exc))
            st.stop()
        st.session_state["fetched"] = df
        st.session_state["fetched_indicators"] = indicators

    df = st.session_state.get("fetched")
    if df is None:
        st.info("Choose indicators and countries, then fetch.")
        st.stop()
    if df.empty:
        st.warning("No data for this selection.")
        st.stop()

    st.dataframe(df, use_container_width=True)
    for indicator in st.session_state.get("fetched_indicators", []):
        column = value_column(indicator)
        if column not in df.columns or df[column].isna().all():
            continue
        fig = px.line(df.dropna(subset=[column]), x="date", y=column, color="country", title=indicator)
        st.plotly_chart(fig, use_container_width=True)

else:
    st.title("Export")
    df = st.session_state.get("fetched")
    if df is None or df.empty:
        st.warning("Nothing fetched yet.")
        st.stop()
    export_df = df.copy()
    export_df["date"] = pd.to_datetime(export_df["date"]).dt.date
    st.dataframe(export_df, use_container_width=True)
    st.download_button("Download CSV", data=export_df.to_csv(index=False).encode("utf-8"), file_name="wdi.csv", mime="text/csv")
    st.download_button("Download JSON", data=json.dumps(export_df.to_dict("records"), default=str, indent=2).encode("utf-8"), file_name="wdi.json", mime="application/json")
