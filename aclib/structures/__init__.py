"""Data structures: counters, tries, sorted lists, heaps, union-find, linked lists and segment trees."""