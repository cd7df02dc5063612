import os
import sys
import logging

from app.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "logs")
logging_path = os.path.join(logging_dir, "youtubesummaryhelper.log")
os.makedirs(logging_dir, exist_ok=True)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('youtubesummaryhelper')
# basicConfig is a no-op when the root logger is already configured
logging.setLevel(config.LOG_LEVEL)
