"""自定义类型示例"""
