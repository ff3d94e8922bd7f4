from .matrix import Matrix, DynMatrix, DimensionError
