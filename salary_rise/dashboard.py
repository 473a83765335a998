# salary_rise/dashboard.py
# Run with: streamlit run salary_rise/dashboard.py
import streamlit as st

from salary_rise import formatting, pipeline
from salary_rise.config import settings
from salary_rise.data_extraction import fetch_cpi_text
from salary_rise.errors import TransportError

st.set_page_config(page_title="Maaş Artışı Hesaplayıcı", layout="centered")


@st.cache_data(ttl=3600)
def load_raw_text(source: str) -> str:
    return fetch_cpi_text(source)


st.title("Kuzey Kıbrıs Maaş Artışı Hesaplayıcı")

try:
    with st.spinner("Veriler yükleniyor..."):
        raw_text = load_raw_text(settings.CPI_DATA_SOURCE)
except TransportError as e:
    st.error(f"Veri yüklenirken hata oluştu: {e.message}", icon="🚨")
    st.stop()

gross_text = st.text_input("Brüt Maaşınızı Giriniz", value="")
result = pipeline.run(raw_text=raw_text, gross_salary=formatting.parse_amount(gross_text))

if not result.ok:
    for message in result.messages:
        st.error(message)
    st.stop()

texts = formatting.summary(result)

st.caption(f"Son Veri: {texts['latest_period']}")
col_rise, col_total = st.columns(2)
with col_rise:
    st.metric("Garantili Artış", texts["guaranteed_rise"])
with col_total:
    st.metric("Ocak Ayından İtibaren Toplam TÜFE Değişimi", texts["total_change"])

st.subheader(f"Yaklaşık Maaş Artışı: {texts['salary_change']} TL")
st.subheader(f"Yaklaşık Yeni Maaşınız: {texts['new_salary']} TL")

st.divider()
st.subheader("Aylık Veriler")
st.dataframe(formatting.monthly_table(result.series), use_container_width=True, hide_index=True)
