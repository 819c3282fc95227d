"""异常类型"""


class MonitorError(Exception):
    """监测系统所有异常的基类"""


class InvalidIndex(MonitorError, IndexError):
    """resolve 的下标超出当前待处理动作范围（多为过期请求）"""

    def __init__(self, index: int, size: int):
        super().__init__(f"动作下标 {index} 越界（当前共 {size} 条）")
        self.index = index
        self.size  = size


class ConfigError(MonitorError, ValueError):
    """配置项无法解析"""
