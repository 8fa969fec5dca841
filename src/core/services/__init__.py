# Shared services used across components: templated mail and CSV export
