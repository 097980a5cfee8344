"""Catalog service: product catalog API with query pipeline and mock reviews."""
