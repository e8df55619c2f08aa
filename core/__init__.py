"""
核心業務邏輯層

這個 package 包含所有會變更狀態的業務邏輯，包括：
- Registry：管理 Wheel 的生命週期（唯一的狀態來源）
- Service：串接建立、查詢、轉動、結果查詢四個操作
- Locks：並發控制工具
"""
