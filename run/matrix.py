import sys

from DenseMatrix.Logger import Logger
from DenseMatrix.Matrix import IMatrix


if __name__ == '__main__':
	Logger.install(Logger(sys.stderr, 'INFO'))
	matrix: IMatrix = IMatrix(4, 6, 0)

	for row in matrix:
		print(''.join(f' {x}' for x in row))

	a: IMatrix = IMatrix([[1, 2], [2, 3]])
	b: IMatrix = IMatrix([[4, 3], [3, 2]])
	print(a + b, a * b, a.transposed(), sep='\n')
	Logger.uninstall().detach()
