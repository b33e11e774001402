"""polish_notation/batch.py"""
import logging
import numpy as np
import pandas as pd

from polish_notation.config import BATCH_CONFIG
from polish_notation.pn_evaluator import evaluate

logger = logging.getLogger(__name__)


def results_to_frame(results):
    """
    把EvaluationResult序列转换为DataFrame
    Returns:
        DataFrame，列为 expression / value / error，顺序与输入一致；
        出错的行value为NaN，error为错误信息
    """
    rows = []
    for result in results:
        rows.append({
            'expression': result.expression,
            'value': result.value if result.ok else np.nan,
            'error': None if result.ok else result.error.value,
        })

    df = pd.DataFrame(rows, columns=BATCH_CONFIG["columns"])
    df['value'] = df['value'].astype(np.float64)
    df['error'] = df['error'].astype(object)
    return df


def evaluate_many(expressions):
    """批量求值，每个表达式独立求值"""
    df = results_to_frame(evaluate(expression) for expression in expressions)
    n_failed = int(df['error'].notna().sum())
    logger.info(f"Evaluated {len(df)} expressions, {n_failed} failed")
    return df


def save_results(df, output_path):
    """把批量结果保存为CSV"""
    df.to_csv(output_path, index=BATCH_CONFIG["csv_index"])
    logger.info(f"Results saved to {output_path}")
