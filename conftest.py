# conftest.py

# Registers the browser fixtures, the GREP filter and the e2e runner settings;
# pytester runs inner sessions against those fixtures in the unit tests
pytest_plugins = ["pytester", "storefront_e2e.fixtures.plugin"]
