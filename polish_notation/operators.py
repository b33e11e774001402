"""polish_notation/operators.py"""
import numpy as np


class Operators:
    """所有操作符的静态方法集合（float64，除零不报错）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：x/0 -> ±inf，0/0 -> nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """取余操作符：结果符号跟随被除数（fmod），x%0 -> nan"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.fmod(np.float64(operand1), np.float64(operand2))
