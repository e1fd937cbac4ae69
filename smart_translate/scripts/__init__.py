"""
/**
 * @file smart_translate/scripts/__init__.py
 * @description 命令行脚本。
 */
"""
