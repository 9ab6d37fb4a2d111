"""Services Layer - learner queries and validated writes over a LearnerStore."""
