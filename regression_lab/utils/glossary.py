# Centralized tooltip/help text used across the app.

METRIC_TOOLTIPS = {
    "MSE": "Mean Squared Error: average of squared residuals. Lower is better.",
    "RMSE": "Root Mean Squared Error: square root of MSE, in the same units as the target.",
    "MAE": "Mean Absolute Error: average absolute prediction error.",
    "R²": "Coefficient of determination: share of target variance explained (1 is a perfect fit).",
    "Adj R²": "Adjusted R²: R² penalised for the number of predictors relative to sample size.",
}
