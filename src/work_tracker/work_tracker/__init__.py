"""Work Tracker package.

Feature modules (records, periods, summaries, storage, export) with a thin
Flask controller layer over plain service / storage classes. The app factory
lives in ``main.create_app``.
"""
