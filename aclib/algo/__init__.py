"""Algorithms: bisection, bounds, compression, inversions, two pointers, sorting and distances."""