# storefront_e2e/core/__init__.py
