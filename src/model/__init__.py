"""
Model - shader parameters, the parameter store and input modulation.
"""
