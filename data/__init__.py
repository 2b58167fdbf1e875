"""数据加载模块"""
