"""Scoring schemes, fuzzy and exact match algorithms, and Latin letter folding."""