"""Thin LangChain tools for the COLOURlovers color and palette API."""
