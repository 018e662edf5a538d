# storefront_e2e/config/__init__.py
