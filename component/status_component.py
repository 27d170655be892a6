# component/status_component.py
import streamlit as st


def render_loading() -> None:
    st.markdown(
        '<p style="text-align:center;color:#FFFFFF;font-size:18px;">Carregando dados...</p>',
        unsafe_allow_html=True,
    )


def render_error(message: str) -> bool:
    """
    Error card with a manual retry button.
    Returns True when the user clicked "Tentar novamente".
    """
    st.error("⚠️ Erro ao carregar dados")
    st.write(message)
    st.caption("Verifique se as credenciais do Supabase estão configuradas corretamente")
    return st.button("Tentar novamente", type="primary")
