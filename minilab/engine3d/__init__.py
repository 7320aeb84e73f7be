"""Pseudo-3D scene of bouncing balls with perspective projection."""