"""스마트스토어 안전 소싱 비서."""
