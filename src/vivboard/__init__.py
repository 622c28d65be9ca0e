"""Vivboard: save and open boards as portable `.viv` archives"""
