"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/utils/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Checksum, pattern and display helpers.
------------------------------------------------------------------------------
"""
