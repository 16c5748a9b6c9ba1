"""Tests for histtime"""
