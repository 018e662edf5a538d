# storefront_e2e/page_objects/__init__.py
