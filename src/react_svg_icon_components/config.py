"""统一配置管理模块。

提供应用程序级别的默认值和环境变量支持。
生成行为本身只由显式传入的 GeneratorConfig 决定。
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationDefaults:
    """生成相关的默认配置"""

    # 组件命名与输出
    COMPONENT_PREFIX: str = "SvgIcon"
    JSX_RUNTIME: str = "classic"
    TYPESCRIPT: bool = True

    # 暂存目录前缀，生成成功后整体替换输出目录
    STAGING_PREFIX: str = ".rsic-staging-"

    # cleanupNumericValues 默认精度
    FLOAT_PRECISION: int = 3


@dataclass(frozen=True)
class LoggingDefaults:
    """日志相关的默认配置"""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig:
    """应用程序配置管理器

    支持环境变量覆盖默认配置
    """

    def __init__(self):
        self.generation = GenerationDefaults()
        self.logging = LoggingDefaults()

        # 从环境变量加载配置
        self._load_from_env()

    def _load_from_env(self):
        """从环境变量加载配置"""
        if log_level := os.getenv("RSIC_LOG_LEVEL"):
            object.__setattr__(self.logging, "LOG_LEVEL", log_level.upper())

        if precision := os.getenv("RSIC_FLOAT_PRECISION"):
            object.__setattr__(self.generation, "FLOAT_PRECISION", int(precision))


# 全局配置实例
config = AppConfig()


def get_config() -> AppConfig:
    """获取全局配置实例"""
    return config


def reset_config():
    """重置配置（主要用于测试）"""
    global config
    config = AppConfig()
