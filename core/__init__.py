# Core package - foundational components
#
# Modules:
# - config: Application settings (permission masks, path symbols, roots)
# - logging: Structured logging
