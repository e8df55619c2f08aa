"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- NamingService：Wheel ID 生成與碰撞重試
- SelectionService：加權隨機選擇
"""
