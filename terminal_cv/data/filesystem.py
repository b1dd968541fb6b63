# filesystem.py

# Static CV tree browsed by the terminal. Directory entries keep their
# declaration order when listed.
FILE_SYSTEM = {
    "~": {
        "type": "directory",
        "content": {
            "about.txt": {
                "type": "file",
                "content": """Samuel Lefcourt
--------------
PhD Candidate in Computer Science
Specializing in AI for Public Health and Security
Contact: slefcourt12@gmail.com
Location: Baltimore, MD""",
            },
            "education": {
                "type": "directory",
                "content": {
                    "phd.txt": {
                        "type": "file",
                        "content": """PhD in Computer Science (AI Focus)
Johns Hopkins University
Expected: May 2025
- Whiting School of Engineering Dean's Fellow
- Research: AI reliability and public health applications""",
                    },
                    "masters.txt": {
                        "type": "file",
                        "content": """MS in Computer Science (Machine Learning)
Southern Methodist University
2020-2021
- GPA: 4.0""",
                    },
                },
            },
            "skills.txt": {
                "type": "file",
                "content": """Technical Skills
--------------
Languages: Python, C++, Java, JavaScript
ML/AI: TensorFlow, PyTorch, Keras
Cloud: AWS, Docker, Kubernetes
Development: React, Node.js, GraphQL""",
            },
            "publications": {
                "type": "directory",
                "content": {
                    "paper1.txt": {
                        "type": "file",
                        "content": """Title: Leveraging AI for Early Pandemic Detection
Publication: Journal of Public Health Tech
Year: 2023""",
                    }
                },
            },
        },
    }
}
