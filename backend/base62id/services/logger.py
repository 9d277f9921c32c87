import logging

app_logger = logging.getLogger("base62id")
app_logger.setLevel(logging.INFO)

# Prevent duplicate logs if this module gets imported multiple times
if not app_logger.handlers:
  # Console handler
  console_handler = logging.StreamHandler()

  # Formatter
  formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  console_handler.setFormatter(formatter)

  app_logger.addHandler(console_handler)

# The host application decides what the root logger does
app_logger.propagate = False
