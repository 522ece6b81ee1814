"""ロギング設定"""

import logging
import sys
from typing import Optional

from hotaru import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(debug: Optional[bool] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    'hotaru' 名前空間のロガーを設定

    デバッグ時は毎秒の個体数ログなどDEBUGレコードが大量に出るため、
    ログファイルを指定した場合はDEBUGをファイルにだけ書き、
    コンソールはINFO以上に抑える。

    Args:
        debug: DEBUGレベルで記録するか（None なら config.DEBUG_MODE）
        log_file: ファイルにも出力する場合のパス

    Returns:
        設定済みの 'hotaru' ロガー
    """
    if debug is None:
        debug = config.DEBUG_MODE
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger("hotaru")
    logger.setLevel(level)

    # 再設定時にハンドラが重複しないようにする
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO if log_file else level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return logger
