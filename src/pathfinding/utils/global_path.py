import sys
from pathlib import Path


def GetProgramDir() -> Path:
    """
    获取程序根目录路径。

    在打包后的环境中，返回可执行文件所在目录。
    在开发环境中，返回项目根目录。
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        # 开发环境：src/pathfinding/utils 往上三级
        return Path(__file__).resolve().parent.parent.parent.parent

def GetConfigPath() -> Path:
    return GetProgramDir() / "config" / "config.yaml"
