# storefront_e2e/utils/__init__.py
