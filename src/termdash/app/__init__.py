"""Dashboard application: actions, state, reducers, views."""
