# storefront_e2e/fixtures/__init__.py
