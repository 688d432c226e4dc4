"""Built-in README template, used when the project has no readme-template.md."""

BUILTIN_TEMPLATE = """\
# 🚀 {{PROJECT_NAME}}

> {{PROJECT_DESCRIPTION}}

![Build](https://img.shields.io/badge/build-passing-brightgreen)
![Java](https://img.shields.io/badge/Java-{{JAVA_SOURCE_VERSION}}-orange)
![Spring Boot](https://img.shields.io/badge/Spring%20Boot-{{SPRING_BOOT_VERSION}}-6DB33F)
![Version](https://img.shields.io/badge/version-{{PROJECT_VERSION}}-blue)

---

## 📦 Project Metadata

| Property | Value |
|----------|-------|
| **Artifact ID** | `{{PROJECT_ARTIFACT_ID}}` |
| **Group ID** | `{{PROJECT_GROUP_ID}}` |
| **Version** | `{{PROJECT_VERSION}}` |
| **Spring Boot** | `{{SPRING_BOOT_VERSION}}` |

---

## 🔨 Build Information

| Property | Value |
|----------|-------|
| **Build Time** | `{{BUILD_TIME}}` |
| **Java Version** | `{{JAVA_VERSION}}` |
| **Java Home** | `{{JAVA_HOME}}` |
| **OS** | `{{OS_NAME}} ({{OS_ARCH}})` |
| **Built By** | `{{USER_NAME}}` |

---

## 🌿 Git Information

| Property | Value |
|----------|-------|
| **Branch** | `{{GIT_BRANCH}}` |
| **Commit** | `{{GIT_COMMIT}}` |
| **Last Commit Message** | {{GIT_MESSAGE}} |

---

## 🌐 REST API Endpoints

{{ENDPOINTS_TABLE}}

> ℹ️  Actuator endpoints are available at `/actuator/health`, `/actuator/info`, `/actuator/metrics`

---

## 🚀 Getting Started

### Prerequisites
- Java {{JAVA_SOURCE_VERSION}}+
- Maven 3.8+

### Run the Application

```bash
# Clone the repository
git clone <repo-url>
cd {{PROJECT_ARTIFACT_ID}}

# Run with Maven
mvn spring-boot:run

# Or run the packaged jar
java -jar target/{{PROJECT_ARTIFACT_ID}}-{{PROJECT_VERSION}}.jar
```

### Build (also regenerates this README!)

```bash
mvn package
```

---

## ⚙️ How README Auto-Generation Works

This README is **automatically regenerated** on every build by `readme-generator`, which:

- Parses `pom.xml` for project metadata
- Reads runtime info (Java version, OS, build time)
- Queries `git` for branch/commit info
- Scans `src/main/java` for Spring mapping annotations
- Fills placeholders in `readme-template.md` and writes `README.md`

To **customise the layout**, run `readmegen init` and edit `readme-template.md`.
Wrap any name from `readmegen placeholders` in double braces, for example
`PROJECT_NAME` becomes a double-braced placeholder.

---

> 📝 **This README was auto-generated on `{{BUILD_TIME}}`. Do not edit it manually. Edit `readme-template.md` instead.**
"""
