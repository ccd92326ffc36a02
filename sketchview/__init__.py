"""
sketchview - 矢量设计文档样式与几何解析引擎

模块结构：
- config/     运行期配置与日志
- models/     文档节点模型与节点工厂
- render/     颜色/几何/填充/样式/文本解析
- assets/     归档读取与资源引用异步解析
"""

__version__ = "0.1.0"
