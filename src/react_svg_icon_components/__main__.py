"""命令行入口。

读取当前目录下的 react-svg-icon-components.json，生成图标组件。
也可以通过 python -m react_svg_icon_components 运行。
"""

import sys

from .config import get_config
from .exceptions import (
    ComponentNameCollisionError,
    ConfigNotFoundError,
    ConfigValidationError,
    IconsDirectoryNotFoundError,
)
from .generator import IconGenerator
from .models.constants import CONFIG_FILE_NAME
from .utils.logging_helpers import setup_logging
from .utils.message_formatter import MessageFormatter


def run() -> int:
    """执行一次生成，返回退出码

    转换失败（TransformError）不在这里处理，直接向上传播。
    """
    try:
        generator = IconGenerator.from_config_file()
    except ConfigNotFoundError as e:
        print(e.message + "\n", file=sys.stderr)
        print(
            MessageFormatter.config_remediation(CONFIG_FILE_NAME, e.example),
            file=sys.stderr,
        )
        return 1
    except ConfigValidationError as e:
        print(e.message, file=sys.stderr)
        return 1

    try:
        summary = generator.generate()
    except (
        IconsDirectoryNotFoundError,
        ComponentNameCollisionError,
        ConfigValidationError,
    ) as e:
        print(e.message, file=sys.stderr)
        return 1

    if summary.skipped:
        print(MessageFormatter.no_svg_files(generator.config.icons_path))
        return 0

    print(summary.format_report())
    return 0


def main() -> None:
    """主入口函数"""
    if len(sys.argv) > 1 and sys.argv[1] in ["--version", "-v"]:
        from . import __version__

        print(f"react-svg-icon-components {__version__}")
        return

    app_config = get_config()
    setup_logging(app_config.logging.LOG_LEVEL, app_config.logging.LOG_FORMAT)

    sys.exit(run())


if __name__ == "__main__":
    main()
